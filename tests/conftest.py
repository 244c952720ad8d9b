"""
Shared test fixtures for the trailhead test suite.
"""

import pytest

from trailhead.patterns.compiler.compiler import ExpressionCompiler
from trailhead.patterns.types.registry import CastorType, TypeRegistry


@pytest.fixture
def hex_registry():
    """Registry with a custom base-16 integer type."""
    return TypeRegistry([CastorType("hex", lambda value: int(value, 16))])


@pytest.fixture
def compiler():
    """Compiler over the built-in types."""
    return ExpressionCompiler()
