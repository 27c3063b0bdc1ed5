from typing import Sequence

from .config import LEARN_RATE
from .errors import InvalidArgument
from .layer import adjust_layer, propagate_errors_to, set_output_errors
from .network import Network
from .scan import scan_back


def propagate_error_back(network: Network, expected_outputs: Sequence[float]) -> Network:
    """
    Set the error on every neuron, working from the output layer back to the input layer.

    Output-layer errors compare each neuron's output with the expected value.
    Every earlier layer collects the errors of the layer after it, weighted by
    the connections between them. The sigmoid derivative is applied later, when
    the weights are adjusted.

    Args:
        network: Network activated for the current pattern
        expected_outputs: One expected value per output-layer neuron

    Returns:
        New network with errors populated
    """
    if len(expected_outputs) != len(network[-1]):
        raise InvalidArgument(
            f"Invalid number of expected outputs: expected {len(network[-1])}, "
            f"got {len(expected_outputs)}"
        )

    def step(layer, next_layer):
        if next_layer is None:
            return set_output_errors(layer, expected_outputs)
        return propagate_errors_to(layer, next_layer)

    # Drop the trailing seed
    return tuple(scan_back(network, None, step)[:len(network)])


def adjust_weights(network: Network, learn_rate: float = LEARN_RATE) -> Network:
    """
    Apply one gradient descent step to every bias and weight in the network.

    Args:
        network: Network with activation and errors populated
        learn_rate: Step size; 0 leaves the network unchanged

    Returns:
        New network with adjusted biases and weights
    """
    previous_layers = (None,) + network[:-1]
    return tuple(
        adjust_layer(layer, previous_layer, learn_rate)
        for layer, previous_layer in zip(network, previous_layers)
    )
