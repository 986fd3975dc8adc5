"""
Registry mapping type names to built-in arbitraries.
"""

import ctypes
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..schema.models import DomainSchema
from .base import Arbitrary, GeneratorError, GeneratorNotFound
from .numeric import DoubleArbitrary, FloatArbitrary, IntArbitrary, LongArbitrary

logger = logging.getLogger(__name__)


class NumericKind(Enum):
    """The closed set of kinds with a built-in arbitrary."""

    INT = ("Int", IntArbitrary)
    LONG = ("Long", LongArbitrary)
    FLOAT = ("Float", FloatArbitrary)
    DOUBLE = ("Double", DoubleArbitrary)

    def __init__(self, canonical: str, factory: Callable[[int], Arbitrary]):
        self.canonical = canonical
        self.factory = factory

    def arbitrary(self, iterations: int) -> Arbitrary:
        """Build the built-in arbitrary for this kind."""
        return self.factory(iterations)


def type_name_of(tp: Any) -> str:
    """
    Return the name used to look up a Python type.

    Builtins are named by their bare qualname ('int'), everything else
    by 'module.qualname' ('numpy.int32').
    """
    qualname = getattr(tp, "__qualname__", None)
    if qualname is None:
        return repr(tp)
    module = getattr(tp, "__module__", None)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


def _in_range(min_val: Optional[float], max_val: Optional[float]) -> Callable[[Any], bool]:
    def predicate(value) -> bool:
        if min_val is not None and not value >= min_val:
            return False
        if max_val is not None and not value <= max_val:
            return False
        return True
    return predicate


class ArbitraryRegistry:
    """
    Registry for built-in arbitraries.
    Maps type name spellings to numeric kinds.
    """

    def __init__(self):
        self._aliases: Dict[str, NumericKind] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register every accepted spelling of the built-in kinds."""
        for kind in NumericKind:
            self.register_alias(kind.canonical, kind)

        # 32-bit integers
        for name in ('int', 'int32', 'i32', 'builtins.int', 'numpy.int32'):
            self.register_alias(name, NumericKind.INT)

        # 64-bit integers
        for name in ('long', 'int64', 'i64', 'numpy.int64'):
            self.register_alias(name, NumericKind.LONG)

        # Single precision
        for name in ('float32', 'f32', 'numpy.float32', 'ctypes.c_float'):
            self.register_alias(name, NumericKind.FLOAT)

        # Double precision; a Python float is a double
        for name in ('double', 'float', 'float64', 'f64', 'builtins.float',
                     'numpy.float64', 'ctypes.c_double'):
            self.register_alias(name, NumericKind.DOUBLE)

        # ctypes integer names alias each other differently per platform
        # (c_longlong is c_long on 64-bit Linux), so map each by its width
        by_width = {4: NumericKind.INT, 8: NumericKind.LONG}
        for name in ('c_int', 'c_long', 'c_longlong', 'c_int32', 'c_int64'):
            kind = by_width.get(ctypes.sizeof(getattr(ctypes, name)))
            if kind is not None:
                self.register_alias(f"ctypes.{name}", kind)

    def register_alias(self, name: str, kind: NumericKind):
        """
        Register another spelling for an existing kind.

        Args:
            name: Type name spelling (e.g., 'int32', 'numpy.int32')
            kind: Kind the spelling resolves to

        Raises:
            GeneratorError: If kind is not one of the built-in kinds
        """
        if not isinstance(kind, NumericKind):
            raise GeneratorError(f"Aliases must target a built-in kind, got {kind!r}")
        self._aliases[name] = kind

    def get(self, type_name: str) -> Optional[NumericKind]:
        """
        Get the kind for a type name.

        Args:
            type_name: Type name spelling

        Returns:
            NumericKind or None if not found
        """
        return self._aliases.get(type_name)

    def aliases(self) -> Dict[NumericKind, List[str]]:
        """Return the accepted spellings grouped by kind, in registration order."""
        grouped: Dict[NumericKind, List[str]] = {kind: [] for kind in NumericKind}
        for name, kind in self._aliases.items():
            grouped[kind].append(name)
        return grouped

    def resolve(self, type_name: str, iterations: int) -> Arbitrary:
        """
        Get the built-in arbitrary for a type name.

        Args:
            type_name: Type name spelling (e.g., 'Int', 'float64')
            iterations: Number of samples the arbitrary offers

        Returns:
            Built-in arbitrary for the kind

        Raises:
            GeneratorNotFound: If the name is not a known spelling
            GeneratorError: If iterations is negative
        """
        kind = self.get(type_name)
        if kind is None:
            raise GeneratorNotFound(type_name)
        logger.debug("Resolved %r to %s with %d iterations", type_name, kind.name, iterations)
        return kind.arbitrary(iterations)

    def default_for(self, tp: Any, iterations: int) -> Arbitrary:
        """
        Get the built-in arbitrary for a Python type.

        Args:
            tp: Type object (e.g., int, float, numpy.float32)
            iterations: Number of samples the arbitrary offers

        Returns:
            Built-in arbitrary for the type

        Raises:
            GeneratorNotFound: If the type has no built-in arbitrary
        """
        return self.resolve(type_name_of(tp), iterations)

    def build_arbitrary(self, domain: DomainSchema, iterations: int) -> Arbitrary:
        """
        Create an arbitrary from a domain schema.

        The type is resolved first, then scaled, then range filtered, then
        its edge cases are replaced.

        Args:
            domain: Domain schema definition
            iterations: Sample count used when the domain does not set one

        Returns:
            Configured arbitrary
        """
        if domain.iterations is not None:
            iterations = domain.iterations
        arb = self.resolve(domain.type, iterations)

        if domain.scale is not None:
            scale = domain.scale
            arb = arb.map(lambda x: x * scale)

        if domain.min is not None or domain.max is not None:
            arb = arb.filter(_in_range(domain.min, domain.max))

        if domain.edgecases is not None:
            arb = arb.set_edgecases(*domain.edgecases)

        return arb


# Global registry instance
_default_registry = ArbitraryRegistry()


def get_default_registry() -> ArbitraryRegistry:
    """Get the default global registry."""
    return _default_registry


def resolve(type_name: str, iterations: int) -> Arbitrary:
    """
    Convenience function to resolve a type name.
    Uses the default global registry.
    """
    return _default_registry.resolve(type_name, iterations)


def default_for(tp: Any, iterations: int) -> Arbitrary:
    """
    Convenience function to resolve a Python type.
    Uses the default global registry.
    """
    return _default_registry.default_for(tp, iterations)


def build_arbitrary(domain: DomainSchema, iterations: int) -> Arbitrary:
    """
    Convenience function to create an arbitrary from a domain schema.
    Uses the default global registry.
    """
    return _default_registry.build_arbitrary(domain, iterations)
