from typing import Iterable, Tuple

from .errors import InvalidArgument


class Pattern:
    """
    One labeled training example.

    Attributes:
        inputs: Input values, by convention in the range 0-1
        outputs: Expected output values, all in the range 0-1 (inclusive)
    """

    __slots__ = ("_inputs", "_outputs")

    def __init__(self, inputs: Iterable[float], outputs: Iterable[float]):
        inputs = tuple(float(value) for value in inputs)
        outputs = tuple(float(value) for value in outputs)

        if not inputs:
            raise InvalidArgument("There must be at least one input in a Pattern")
        if not outputs:
            raise InvalidArgument("There must be at least one output in a Pattern")
        if any(not 0.0 <= value <= 1.0 for value in outputs):
            raise InvalidArgument("Outputs must all be in the range 0-1 (inclusive)")

        self._inputs = inputs
        self._outputs = outputs

    @property
    def inputs(self) -> Tuple[float, ...]:
        return self._inputs

    @property
    def outputs(self) -> Tuple[float, ...]:
        return self._outputs

    def __eq__(self, other):
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._inputs == other._inputs and self._outputs == other._outputs

    def __hash__(self):
        return hash((self._inputs, self._outputs))

    def __repr__(self):
        return f"Pattern(inputs={list(self._inputs)}, outputs={list(self._outputs)})"
