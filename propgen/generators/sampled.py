"""
Arbitraries built from a sampling function.
"""

from itertools import count
from random import Random
from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

from .base import Arbitrary, GeneratedValue, GeneratorError

T = TypeVar("T")


class SampledArbitrary(Arbitrary[T]):
    """
    Arbitrary backed by a function that draws one value from a random source.

    Examples:
        - SampledArbitrary(lambda rnd: rnd.randint(1, 6), edgecases=[1, 6], iterations=100)
        - SampledArbitrary(lambda rnd: rnd.random()) -> unbounded samples
    """

    def __init__(self, sampler: Callable[[Random], T], edgecases: Iterable[T] = (),
                 iterations: Optional[int] = None):
        """
        Initialize the arbitrary.

        Args:
            sampler: Function drawing a single value from the given source
            edgecases: Values emitted before any sample, in order
            iterations: Number of samples offered, or None for an unbounded stream
        """
        if iterations is not None and iterations < 0:
            raise GeneratorError(f"iterations must be >= 0, got {iterations}")
        self.sampler = sampler
        self.iterations = iterations
        self._edgecases = tuple(edgecases)

    def edgecases(self) -> List[T]:
        return list(self._edgecases)

    def samples(self, rnd: Random) -> Iterator[GeneratedValue[T]]:
        counter = count() if self.iterations is None else range(self.iterations)
        return (GeneratedValue(self.sampler(rnd)) for _ in counter)

    def __repr__(self):
        return f"{type(self).__name__}(iterations={self.iterations})"
