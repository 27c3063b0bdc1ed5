import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from .backward import adjust_weights, propagate_error_back
from .config import DEFAULT_ITERATION_CAP, LEARN_RATE
from .errors import InvalidArgument, ReachedLocalErrorMinimum
from .network import (
    Network,
    activate_network,
    initialize_network,
    layer_sizes_of,
    network_outputs,
    validate_layer_sizes,
)
from .pattern import Pattern
from .progress import ProgressCallback, print_progress
from .scan import scan

RandomSource = Union[np.random.Generator, int]


@dataclass(frozen=True)
class TrainingState:
    """Network snapshot plus the total error accumulated while producing it."""
    total_error: float
    network: Network


class Predictor:
    """
    Maps input vectors to output-layer values using a trained network.

    Holds an immutable network, so it can be called repeatedly and from
    several threads.

    Attributes:
        iterations: Iterations it took to converge
        total_error: Total squared error of the converging iteration
    """

    def __init__(self, network: Network, iterations: int = 0, total_error: float = 0.0):
        self._network = network
        self.iterations = iterations
        self.total_error = total_error

    @property
    def layer_sizes(self) -> List[int]:
        return layer_sizes_of(self._network)

    @property
    def network(self) -> Network:
        return self._network

    def __call__(self, inputs: Iterable[float]) -> Tuple[float, ...]:
        inputs = tuple(inputs)
        if len(inputs) != len(self._network[0]):
            raise InvalidArgument(
                f"Invalid number of inputs: expected {len(self._network[0])}, got {len(inputs)}"
            )
        return network_outputs(activate_network(self._network, inputs))

    def __repr__(self):
        return (f"Predictor(layers={self.layer_sizes}, iterations={self.iterations}, "
                f"error={self.total_error:.4f})")


def squared_error(actual: Sequence[float], expected: Sequence[float]) -> float:
    return sum((a - e) ** 2 for a, e in zip(actual, expected))


def train_pattern(state: TrainingState, pattern: Pattern,
                  learn_rate: float = LEARN_RATE) -> TrainingState:
    """
    Train the network on one pattern.

    The pattern's error is measured on the activated network before the
    weights are adjusted for it.
    """
    activated = activate_network(state.network, pattern.inputs)
    error = squared_error(network_outputs(activated), pattern.outputs)
    adjusted = adjust_weights(propagate_error_back(activated, pattern.outputs), learn_rate)
    return TrainingState(state.total_error + error, adjusted)


def run_iteration(network: Network, patterns: Sequence[Pattern],
                  learn_rate: float = LEARN_RATE) -> TrainingState:
    """One pass over every pattern in order; each pattern sees the previous one's adjustment."""
    state = TrainingState(0.0, network)
    for pattern in patterns:
        state = train_pattern(state, pattern, learn_rate)
    return state


def _as_generator(random_source: RandomSource) -> np.random.Generator:
    if isinstance(random_source, np.random.Generator):
        return random_source
    if isinstance(random_source, (int, np.integer)) and not isinstance(random_source, bool):
        return np.random.default_rng(int(random_source))
    raise InvalidArgument("random_source must be a numpy Generator or an integer seed")


def _validate(layer_sizes, patterns, acceptable_error, iteration_cap) -> List[int]:
    sizes = validate_layer_sizes(layer_sizes)
    if isinstance(iteration_cap, bool) or not isinstance(iteration_cap, (int, np.integer)):
        raise InvalidArgument("iteration_cap must be a whole number")
    if iteration_cap <= 0:
        raise InvalidArgument("iteration_cap must be positive")
    if math.isnan(acceptable_error) or acceptable_error < 0:
        raise InvalidArgument("acceptable_error must not be negative")
    if not patterns:
        raise InvalidArgument("At least one pattern is required")
    for pattern in patterns:
        if len(pattern.inputs) != sizes[0] or len(pattern.outputs) != sizes[-1]:
            raise InvalidArgument(
                "Invalid pattern provided - does not match Input and/or Output sizes"
            )
    return sizes


def _report(progress: ProgressCallback, iteration: int, total_error: float):
    # Progress reporting must never affect the training outcome
    try:
        progress(iteration, total_error)
    except Exception as e:
        print(f"[Error] Progress report failed at iteration {iteration}: {e}")


def iterate_training(network: Network, patterns: Sequence[Pattern],
                     iteration_cap: int) -> Iterator[TrainingState]:
    """
    Lazily yield the state after each iteration, up to iteration_cap of them.

    The untrained seed state (infinite error) is not yielded.
    """
    states = scan(
        range(iteration_cap),
        TrainingState(math.inf, network),
        lambda state, _: run_iteration(state.network, patterns),
    )
    next(states)
    return states


def train(layer_sizes: Sequence[int],
          patterns: Sequence[Pattern],
          acceptable_error: float,
          random_source: RandomSource,
          iteration_cap: int = DEFAULT_ITERATION_CAP,
          progress: ProgressCallback = print_progress) -> Predictor:
    """
    Train a feed-forward network with online backpropagation.

    Patterns are repeatedly run through the network, errors propagated back
    and weights adjusted, until the total squared error of an iteration is at
    or below acceptable_error.

    Args:
        layer_sizes: Neuron count per layer (at least two: input and output)
        patterns: Training examples matching the input and output layer sizes
        acceptable_error: Total squared error over all patterns that counts as trained
        random_source: numpy Generator or integer seed for the initial weights
        iteration_cap: Iterations allowed before giving up
        progress: Called with (iteration, total_error) after every iteration

    Returns:
        Predictor wrapping the trained network

    Raises:
        InvalidArgument: Bad configuration or patterns that don't fit the layers
        ReachedLocalErrorMinimum: No iteration within the cap was acceptable
    """
    patterns = list(patterns)
    sizes = _validate(layer_sizes, patterns, acceptable_error, iteration_cap)
    network = initialize_network(sizes, _as_generator(random_source))

    best_error = math.inf
    for iteration, state in enumerate(iterate_training(network, patterns, iteration_cap), start=1):
        _report(progress, iteration, state.total_error)
        best_error = min(best_error, state.total_error)
        if state.total_error <= acceptable_error:
            return Predictor(state.network, iterations=iteration, total_error=state.total_error)

    raise ReachedLocalErrorMinimum(iteration_cap, best_error)
