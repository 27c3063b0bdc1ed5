"""
Folds that keep every intermediate result.

Both helpers thread an accumulator through a sequence the way functools.reduce
does, but return each interim value instead of only the last one. The network
code uses them to build a new layer from the layer computed just before it.
"""
from typing import Callable, Iterable, Iterator, List, TypeVar

T = TypeVar("T")
Acc = TypeVar("Acc")


def scan(source: Iterable[T], seed: Acc, step: Callable[[Acc, T], Acc]) -> Iterator[Acc]:
    """
    Thread a value forwards through a sequence, yielding every interim value.

    The first value yielded is the seed. Each following value is the result of
    step(previous value, next item), so the output is one longer than the
    source. The consumer may stop early and the remaining items are never
    evaluated.
    """
    accumulator = seed
    yield accumulator
    for item in source:
        accumulator = step(accumulator, item)
        yield accumulator


def scan_back(source: Iterable[T], seed: Acc, step: Callable[[T, Acc], Acc]) -> List[Acc]:
    """
    Thread a value backwards through a sequence, keeping every interim value.

    Works from the last item to the first, calling step(item, value built from
    the items after it). The results come back in source order: the first
    entry has folded the whole sequence and the last entry is the seed. The
    whole sequence has to be walked before anything can be returned.
    """
    items = list(source)
    results = [seed]
    accumulator = seed
    for item in reversed(items):
        accumulator = step(item, accumulator)
        results.append(accumulator)
    results.reverse()
    return results
