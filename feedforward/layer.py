from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import NetworkConsistencyError
from .neuron import Neuron

Layer = Tuple[Neuron, ...]


def new_layer(size: int, previous_size: int, rng: np.random.Generator) -> Layer:
    """
    Build an untrained layer.

    Args:
        size: Number of neurons in the layer
        previous_size: Number of neurons in the layer before it (0 for the input layer)
        rng: Source of the initial weights, drawn uniformly from [-1, 1)

    Returns:
        Tuple of neurons with zero bias
    """
    return tuple(
        Neuron(weights=tuple(float(w) for w in rng.uniform(-1.0, 1.0, previous_size)))
        for _ in range(size)
    )


def layer_outputs(layer: Layer) -> Tuple[float, ...]:
    return tuple(neuron.output for neuron in layer)


def check_connections(neuron: Neuron, previous_layer: Layer):
    """Every neuron needs exactly one weight per neuron in the previous layer."""
    if len(previous_layer) != len(neuron.weights):
        raise NetworkConsistencyError(
            f"The number of neurons in the previous layer ({len(previous_layer)}) must match "
            f"the number of weights on the neuron ({len(neuron.weights)})"
        )


def set_layer_inputs(layer: Layer, inputs: Sequence[float]) -> Layer:
    """Input layer: each neuron outputs its paired input value directly."""
    return tuple(neuron.with_raw_output(value) for neuron, value in zip(layer, inputs))


def activate_layer(layer: Layer, previous_layer: Layer) -> Layer:
    """Compute each neuron's weighted input from the previous layer's outputs."""
    previous_outputs = layer_outputs(previous_layer)
    activated = []
    for neuron in layer:
        check_connections(neuron, previous_layer)
        weighted_input = sum(w * o for w, o in zip(neuron.weights, previous_outputs))
        activated.append(neuron.with_weighted_input(weighted_input))
    return tuple(activated)


def set_output_errors(layer: Layer, expected_outputs: Sequence[float]) -> Layer:
    """Output layer: error is how far each neuron's output is from the expected value."""
    return tuple(
        neuron.with_error(expected - neuron.output)
        for neuron, expected in zip(layer, expected_outputs)
    )


def propagate_errors_to(layer: Layer, next_layer: Layer) -> Layer:
    """
    Attribute the next layer's errors back to this layer.

    Each neuron's error is the sum, over the neurons of the next layer, of that
    neuron's error times the weight of its connection back to this one.
    """
    errors = [0.0] * len(layer)
    for neuron in next_layer:
        check_connections(neuron, layer)
        for index, weight in enumerate(neuron.weights):
            errors[index] += neuron.error * weight
    return tuple(neuron.with_error(error) for neuron, error in zip(layer, errors))


def adjust_layer(layer: Layer, previous_layer: Optional[Layer], learn_rate: float) -> Layer:
    """
    Gradient descent step for a layer's biases and incoming weights.

    The input layer (no previous layer) has nothing to adjust and comes back unchanged.
    """
    if previous_layer is None:
        return layer

    previous_outputs = layer_outputs(previous_layer)
    adjusted = []
    for neuron in layer:
        check_connections(neuron, previous_layer)
        activation = neuron.output
        derivative = activation * (1.0 - activation)
        delta = neuron.error * derivative * learn_rate
        adjusted.append(neuron.adjusted(
            bias=neuron.bias + delta,
            weights=tuple(w + delta * o for w, o in zip(neuron.weights, previous_outputs)),
        ))
    return tuple(adjusted)
