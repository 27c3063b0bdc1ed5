import os
from datetime import datetime
from typing import Callable, List, Optional

import matplotlib.pyplot as plt

ProgressCallback = Callable[[int, float], None]


def print_progress(iteration: int, total_error: float):
    """Print one timestamped line per completed training iteration."""
    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    print(f"{timestamp} Iteration {iteration}\tError {total_error:.3f}")


def silent(iteration: int, total_error: float):
    pass


def combine(*callbacks: ProgressCallback) -> ProgressCallback:
    """Fan each progress observation out to several collaborators, in order."""
    def report(iteration: int, total_error: float):
        for callback in callbacks:
            callback(iteration, total_error)
    return report


class ErrorHistory:
    """
    Records the total error reported after each training iteration.

    Attributes:
        iterations: Iteration numbers in the order they were reported
        errors: Total squared error for each recorded iteration
    """

    def __init__(self):
        self.iterations: List[int] = []
        self.errors: List[float] = []

    def __call__(self, iteration: int, total_error: float):
        self.iterations.append(iteration)
        self.errors.append(total_error)

    def __len__(self):
        return len(self.errors)

    @property
    def last_error(self) -> Optional[float]:
        return self.errors[-1] if self.errors else None

    def reset(self):
        self.iterations = []
        self.errors = []

    def plot(self, path: str, acceptable_error: Optional[float] = None):
        """
        Plot the error curve and save it as an image.

        Args:
            path: Output file (PNG)
            acceptable_error: Draws the convergence threshold when given
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(self.iterations, self.errors, 'r-', linewidth=2, label='Total error')
        if acceptable_error is not None:
            ax.axhline(acceptable_error, color='g', linestyle='--', label='Acceptable error')
        ax.set_xlabel('Iteration')
        ax.set_ylabel('Total Squared Error')
        ax.set_title('Error Progress')
        ax.legend()
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        fig.savefig(path, dpi=150, bbox_inches='tight')
        print(f"\nError curve saved as '{path}'")
        plt.close(fig)
