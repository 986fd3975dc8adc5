"""Pytest configuration and shared fixtures for propgen tests."""

from random import Random

import pytest

from propgen.generators import SampledArbitrary


def small_ints(iterations=50):
    """Integers in [-100, 100] with edge cases 0, 1, -1."""
    return SampledArbitrary(lambda rnd: rnd.randint(-100, 100), edgecases=[0, 1, -1], iterations=iterations)


@pytest.fixture
def int_arb():
    return small_ints()


@pytest.fixture
def unbounded_arb():
    """Arbitrary with an endless sample stream."""
    return SampledArbitrary(lambda rnd: rnd.randint(-100, 100), edgecases=[0, 1, -1])


@pytest.fixture
def make_rnd():
    """Factory for identically seeded sources."""
    def _make(seed: int = 1234) -> Random:
        return Random(seed)
    return _make


@pytest.fixture
def plan_file(tmp_path):
    """Write a valid generation plan and return its path."""
    path = tmp_path / "plan.yaml"
    path.write_text(
        'version: "1.0.0"\n'
        "seed: 7\n"
        "iterations: 5\n"
        "domains:\n"
        "  - name: age\n"
        "    type: Int\n"
        "    min: 0\n"
        "    max: 130\n"
        "    edgecases: [0, 130]\n"
        "  - name: ratio\n"
        "    type: float64\n"
        "    iterations: 3\n"
        "    scale: 0.5\n"
    )
    return path
