"""
Base generator interfaces for property value generation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import chain
from random import Random
from typing import Any, Callable, Generic, Iterator, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class GeneratedValue(Generic[T]):
    """A single value produced by a generator."""

    value: T

    def map(self, f: Callable[[T], U]) -> "GeneratedValue[U]":
        """
        Transform the wrapped value.

        Args:
            f: Function applied to the wrapped value

        Returns:
            New GeneratedValue holding f(value)
        """
        return GeneratedValue(f(self.value))


class Gen(ABC, Generic[T]):
    """
    Abstract base class for value generators.

    Generators never own a random source. The caller creates the source
    and passes it into every call, so equal-state sources give equal output.
    """

    @abstractmethod
    def generate(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        """
        Produce a lazy sequence of values.

        Args:
            rnd: Random source owned by the caller; it is advanced as values are drawn

        Returns:
            Iterator of GeneratedValue
        """
        pass


class Arbitrary(Gen[T]):
    """
    A generator split into deterministic edge cases and random samples.

    Edge cases are values that commonly expose bugs (zero, -1, the limits of
    a numeric type). Samples are drawn from the random source and give
    breadth. generate() emits every edge case before the first sample.
    """

    @abstractmethod
    def edgecases(self) -> List[T]:
        """
        Return the edge cases for this arbitrary.

        The result is finite, may be empty, and is the same list in the same
        order on every call.
        """
        pass

    @abstractmethod
    def samples(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        """
        Return random sample values.

        Args:
            rnd: Random source; all randomness must come from it

        Returns:
            Lazy, possibly unbounded iterator of GeneratedValue
        """
        pass

    def generate(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        return chain((GeneratedValue(e) for e in self.edgecases()), self.samples(rnd))

    def map(self, f: Callable[[T], U]) -> "Arbitrary[U]":
        """Return an arbitrary whose edge cases and samples are passed through f."""
        from .combinators import MappedArbitrary
        return MappedArbitrary(self, f)

    def filter(self, predicate: Callable[[T], bool]) -> "Arbitrary[T]":
        """Return an arbitrary that keeps only values satisfying predicate."""
        from .combinators import FilteredArbitrary
        return FilteredArbitrary(self, predicate)

    def set_edgecases(self, *edgecases: T) -> "Arbitrary[T]":
        """
        Replace the edge cases of this arbitrary.

        The samples are unchanged. Calling with no values gives an
        arbitrary without edge cases.
        """
        from .combinators import EdgeCaseOverride
        return EdgeCaseOverride(self, edgecases)


class GeneratorError(Exception):
    """Exception raised when generator creation or execution fails."""
    pass


class GeneratorNotFound(GeneratorError):
    """Exception raised when no built-in generator exists for a type."""

    def __init__(self, type_name: Any):
        self.type_name = type_name
        super().__init__(f"Cannot infer generator for {type_name}; specify generators explicitly")
