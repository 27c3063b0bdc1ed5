from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import InvalidArgument
from .layer import Layer, activate_layer, layer_outputs, new_layer, set_layer_inputs
from .scan import scan

Network = Tuple[Layer, ...]


def validate_layer_sizes(layer_sizes: Sequence[int]) -> List[int]:
    sizes = list(layer_sizes)
    if len(sizes) < 2:
        raise InvalidArgument("Must be at least two layers - one for input, one for output")
    if any(isinstance(size, bool) or not isinstance(size, (int, np.integer)) for size in sizes):
        raise InvalidArgument("All layer sizes must be whole numbers")
    if any(size <= 0 for size in sizes):
        raise InvalidArgument("All layer sizes must be positive values")
    return [int(size) for size in sizes]


def initialize_network(layer_sizes: Sequence[int], rng: np.random.Generator) -> Network:
    """
    Build an untrained network.

    Args:
        layer_sizes: Neuron count per layer, input layer first and output layer last
        rng: Source of the random initial weights (range -1 to 1)

    Returns:
        Network with zero biases; the input layer has no weights
    """
    sizes = validate_layer_sizes(layer_sizes)
    layers = []
    previous_size = 0
    for size in sizes:
        layers.append(new_layer(size, previous_size, rng))
        previous_size = size
    return tuple(layers)


def activate_network(network: Network, inputs: Iterable[float]) -> Network:
    """
    Run one input vector forwards through the network.

    The input layer takes its outputs straight from the inputs; every later layer
    is computed from the freshly activated layer before it.

    Args:
        network: Network to activate
        inputs: One value per input-layer neuron

    Returns:
        New network holding the activated state for these inputs
    """
    inputs = tuple(inputs)
    if len(inputs) != len(network[0]):
        raise InvalidArgument(
            f"Invalid number of inputs: expected {len(network[0])}, got {len(inputs)}"
        )

    def step(previous_layer, layer):
        if previous_layer is None:
            return set_layer_inputs(layer, inputs)
        return activate_layer(layer, previous_layer)

    # Drop the seed; it is only there so the input layer has no predecessor
    return tuple(scan(network, None, step))[1:]


def network_outputs(network: Network) -> Tuple[float, ...]:
    return layer_outputs(network[-1])


def layer_sizes_of(network: Network) -> List[int]:
    return [len(layer) for layer in network]


def print_network_summary(network: Network):
    """Print a summary of the network structure and parameters."""
    print("\n" + "="*60)
    print("FEED-FORWARD NETWORK SUMMARY")
    print("="*60)
    print(f"Layer sizes: {layer_sizes_of(network)}")
    print(f"Total neurons: {sum(len(layer) for layer in network)}")
    print()

    print("Layer Details:")
    for i, layer in enumerate(network):
        if i == 0:
            print(f"  Layer {i}: {len(layer)} input neurons")
            continue
        biases = [neuron.bias for neuron in layer]
        weights = [w for neuron in layer for w in neuron.weights]
        print(f"  Layer {i}: {len(layer)} neurons, "
              f"bias range=[{min(biases):.3f}, {max(biases):.3f}], "
              f"weight range=[{min(weights):.3f}, {max(weights):.3f}]")
    print("="*60 + "\n")
