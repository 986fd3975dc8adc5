"""
Edge-case first, seeded value generation for property-based tests.
"""

from .generators import (
    Arbitrary,
    Gen,
    GeneratedValue,
    GeneratorError,
    GeneratorNotFound,
    SampledArbitrary,
    default_for,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    'Arbitrary',
    'Gen',
    'GeneratedValue',
    'GeneratorError',
    'GeneratorNotFound',
    'SampledArbitrary',
    'default_for',
    'resolve',
]
