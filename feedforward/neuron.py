import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import GRADIENT


def sigmoid(x: float) -> float:
    """Logistic function, evaluated without overflowing for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


@dataclass(frozen=True)
class Neuron:
    """
    A single neuron, immutable. Every training phase builds replacements.

    Attributes:
        weights: Weight of the connection to each neuron in the previous layer
            (empty for input-layer neurons)
        bias: Offset added to the weighted input before activation
        error: Error signal set by backward propagation
        weighted_input: Sum of the previous layer's outputs times the weights
        raw_output: Output used as-is, bypassing the sigmoid (input layer only);
            None when unset
    """
    weights: Tuple[float, ...] = ()
    bias: float = 0.0
    error: float = 0.0
    weighted_input: float = 0.0
    raw_output: Optional[float] = None

    @property
    def output(self) -> float:
        if self.raw_output is not None:
            return self.raw_output
        return sigmoid(GRADIENT * (self.weighted_input + self.bias))

    def with_raw_output(self, value: float) -> "Neuron":
        return replace(self, raw_output=float(value))

    def with_weighted_input(self, value: float) -> "Neuron":
        """Activated copy: error cleared and the sigmoid applies."""
        return replace(self, weighted_input=value, error=0.0, raw_output=None)

    def with_error(self, value: float) -> "Neuron":
        return replace(self, error=value)

    def adjusted(self, bias: float, weights: Tuple[float, ...]) -> "Neuron":
        return replace(self, bias=bias, weights=tuple(weights))

    def __repr__(self):
        state = "input" if self.raw_output is not None else f"{len(self.weights)} weights"
        return f"Neuron({state}, bias={self.bias:.3f}, output={self.output:.3f}, error={self.error:.3f})"
