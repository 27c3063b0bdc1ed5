import argparse
from dataclasses import dataclass, field
from typing import List, Optional

# ============================================================================
# TRAINING CONSTANTS
# ============================================================================

GRADIENT = 6.0  # Steepness of the sigmoid curve
LEARN_RATE = 0.05  # Gradient descent step size
DEFAULT_ITERATION_CAP = 2000  # Iterations before giving up on convergence

# ============================================================================
# CONSOLE RUN SETTINGS
# ============================================================================

DEFAULT_DATASET = "data/xor.csv"
DEFAULT_PLOT_PATH = "output/training_error.png"


@dataclass
class TrainingConfig:
    """
    Settings for a console training run.

    Attributes:
        dataset: Path of the comma-delimited dataset file
        number_of_inputs: Leading columns of each row that are inputs
        hidden_layers: Neuron count of each hidden layer, in order
        acceptable_error: Total squared error that counts as converged
        seed: Seed for the first training attempt
        iteration_cap: Iterations per attempt before giving up
        retries: Extra attempts (each with the next seed) after a local minimum
        plot_path: Where to save the error curve, None to skip plotting
    """
    dataset: str = DEFAULT_DATASET
    number_of_inputs: int = 2
    hidden_layers: List[int] = field(default_factory=lambda: [2])
    acceptable_error: float = 0.1
    seed: int = 0
    iteration_cap: int = 5000
    retries: int = 5
    plot_path: Optional[str] = None

    def layer_sizes(self, number_of_outputs: int) -> List[int]:
        """Assemble the full layer size list: inputs, hidden layers, outputs."""
        return [self.number_of_inputs] + list(self.hidden_layers) + [number_of_outputs]

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "TrainingConfig":
        parser = argparse.ArgumentParser(
            description="Train a feed-forward network with online backpropagation."
        )
        parser.add_argument("--data", dest="dataset", default=DEFAULT_DATASET,
                            help="comma-delimited dataset, '#' lines are comments")
        parser.add_argument("--inputs", dest="number_of_inputs", type=int, default=2,
                            help="number of leading input columns per row")
        parser.add_argument("--hidden", dest="hidden_layers", type=_layer_list, default=[2],
                            help="comma-separated hidden layer sizes, e.g. 4,3,2")
        parser.add_argument("--acceptable-error", type=float, default=0.1)
        parser.add_argument("--seed", type=int, default=0)
        parser.add_argument("--iterations", dest="iteration_cap", type=int, default=5000)
        parser.add_argument("--retries", type=int, default=5)
        parser.add_argument("--plot", dest="plot_path", nargs="?", const=DEFAULT_PLOT_PATH,
                            default=None, help="save the error curve as a PNG")
        args = parser.parse_args(argv)
        return cls(**vars(args))


def _layer_list(text: str) -> List[int]:
    if not text.strip():
        return []
    try:
        return [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid layer list: {text!r}")
