"""
fluent — fluent sequences и left-to-right composition chains.

Чистые, синхронные примитивы без I/O:
- SequenceWrapper: filter/transform над упорядоченной последовательностью
- CompositionChain: ленивая композиция унарных функций над значением
"""

from src.fluent.composition import (
    CompositionChain,
    and_then,
    apply_all,
    compose_all,
    from_value,
    identity,
)
from src.fluent.exceptions import FluentError, InvalidArgument
from src.fluent.sequence import SequenceWrapper, from_sequence
from src.fluent.steps import add, deduct_percent, multiply, subtract

__all__ = [
    # Exceptions
    "FluentError",
    "InvalidArgument",
    # Sequence
    "SequenceWrapper",
    "from_sequence",
    # Composition
    "CompositionChain",
    "from_value",
    "identity",
    "and_then",
    "compose_all",
    "apply_all",
    # Steps
    "add",
    "subtract",
    "multiply",
    "deduct_percent",
]
