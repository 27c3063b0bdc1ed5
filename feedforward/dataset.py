import warnings
from typing import List, Sequence

import numpy as np

from .errors import InvalidArgument
from .pattern import Pattern


def split_row(row: Sequence[float], number_of_inputs: int) -> Pattern:
    """Leading number_of_inputs values are inputs, the rest are expected outputs."""
    values = [float(value) for value in row]
    return Pattern(inputs=values[:number_of_inputs], outputs=values[number_of_inputs:])


def load_patterns(path: str, number_of_inputs: int) -> List[Pattern]:
    """
    Load training patterns from a comma-delimited file.

    Blank lines and lines starting with '#' are ignored.

    Args:
        path: Dataset file
        number_of_inputs: Leading columns of each row that are inputs

    Returns:
        One validated Pattern per row, in file order
    """
    if number_of_inputs <= 0:
        raise InvalidArgument("number_of_inputs must be positive")

    with warnings.catch_warnings():
        # An empty file is reported below as InvalidArgument
        warnings.simplefilter("ignore", UserWarning)
        try:
            data = np.loadtxt(path, delimiter=",", comments="#", ndmin=2, dtype=float)
        except ValueError as e:
            raise InvalidArgument(f"Could not parse dataset {path}: {e}") from e

    if data.size == 0:
        raise InvalidArgument(f"Dataset {path} contains no patterns")
    if data.shape[1] <= number_of_inputs:
        raise InvalidArgument(
            f"Dataset {path} has {data.shape[1]} columns, leaving no outputs "
            f"after {number_of_inputs} inputs"
        )
    return [split_row(row, number_of_inputs) for row in data]
