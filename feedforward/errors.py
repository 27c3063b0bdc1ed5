class FeedforwardError(Exception):
    """Base class for every error raised by the feedforward package."""


class InvalidArgument(FeedforwardError, ValueError):
    """
    Raised when a caller supplies bad configuration or input data.

    Covers layer sizes, iteration caps, acceptable error values, pattern
    shapes and predictor inputs of the wrong length.
    """


class NetworkConsistencyError(FeedforwardError, RuntimeError):
    """
    Raised when a network is malformed.

    A neuron's weight count must match the size of the layer before it. A
    network built by initialize_network can never trigger this.
    """


class ReachedLocalErrorMinimum(FeedforwardError):
    """
    Raised when training can not bring the total error down to the acceptable
    error within the iteration cap.

    Training has presumably settled into a local minimum it can not escape.
    Trying again with a different random seed starts from different weights
    and may succeed.
    """

    def __init__(self, iterations: int, best_error: float):
        self.iterations = iterations
        self.best_error = best_error
        super().__init__(
            f"Error did not reach an acceptable value after {iterations} iterations "
            f"(best total error {best_error:.4f})"
        )
