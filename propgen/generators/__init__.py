"""
Value generators for property-based testing.
"""

from .base import Arbitrary, Gen, GeneratedValue, GeneratorError, GeneratorNotFound
from .combinators import EdgeCaseOverride, FilteredArbitrary, MappedArbitrary
from .sampled import SampledArbitrary
from .numeric import DoubleArbitrary, FloatArbitrary, IntArbitrary, LongArbitrary
from .registry import (
    ArbitraryRegistry,
    NumericKind,
    build_arbitrary,
    default_for,
    get_default_registry,
    resolve,
    type_name_of,
)

__all__ = [
    # Base
    'Arbitrary',
    'Gen',
    'GeneratedValue',
    'GeneratorError',
    'GeneratorNotFound',
    # Combinators
    'MappedArbitrary',
    'FilteredArbitrary',
    'EdgeCaseOverride',
    # Built-in
    'SampledArbitrary',
    'IntArbitrary',
    'LongArbitrary',
    'FloatArbitrary',
    'DoubleArbitrary',
    # Registry
    'ArbitraryRegistry',
    'NumericKind',
    'get_default_registry',
    'resolve',
    'default_for',
    'build_arbitrary',
    'type_name_of',
]
