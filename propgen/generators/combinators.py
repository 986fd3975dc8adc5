"""
Arbitraries derived from other arbitraries.

Each combinator holds the arbitrary it wraps and applies its transformation
lazily, so composing over an unbounded sample stream stays safe.
"""

from random import Random
from typing import Callable, Iterable, Iterator, List, TypeVar

from .base import Arbitrary, GeneratedValue

T = TypeVar("T")
U = TypeVar("U")


class MappedArbitrary(Arbitrary[U]):
    """Apply a function to every edge case and sample of another arbitrary."""

    def __init__(self, source: Arbitrary[T], f: Callable[[T], U]):
        self.source = source
        self.f = f

    def edgecases(self) -> List[U]:
        # duplicates after mapping are kept
        return [self.f(e) for e in self.source.edgecases()]

    def samples(self, rnd: Random) -> Iterator[GeneratedValue[U]]:
        return (value.map(self.f) for value in self.source.samples(rnd))

    def __repr__(self):
        return f"MappedArbitrary({self.source!r}, {self.f!r})"


class FilteredArbitrary(Arbitrary[T]):
    """
    Keep only the edge cases and samples accepted by a predicate.

    There is no retry limit: a predicate that rejects almost every sample
    makes the stream sparse, and a bounded source whose samples are all
    rejected yields nothing. Consumers bound how much they pull.
    """

    def __init__(self, source: Arbitrary[T], predicate: Callable[[T], bool]):
        self.source = source
        self.predicate = predicate

    def edgecases(self) -> List[T]:
        return [e for e in self.source.edgecases() if self.predicate(e)]

    def samples(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        return (value for value in self.source.samples(rnd) if self.predicate(value.value))

    def __repr__(self):
        return f"FilteredArbitrary({self.source!r}, {self.predicate!r})"


class EdgeCaseOverride(Arbitrary[T]):
    """Replace the edge cases of an arbitrary, keeping its samples."""

    def __init__(self, source: Arbitrary[T], edgecases: Iterable[T]):
        self.source = source
        self._edgecases = tuple(edgecases)

    def edgecases(self) -> List[T]:
        return list(self._edgecases)

    def samples(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        return self.source.samples(rnd)

    def __repr__(self):
        return f"EdgeCaseOverride({self.source!r}, {list(self._edgecases)!r})"
