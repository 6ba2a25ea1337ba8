"""
Steps — фабрики арифметических step-функций для CompositionChain

Каждый шаг — обычная унарная функция, а не подкласс абстрактного decorator.
Набор и порядок шагов определяется только тем, какие with_step() вызваны.

Пример (расчёт остатка после вычетов):
    from_value(100000)
        .with_step(subtract(2400))
        .with_step(subtract(15000))
        .with_step(subtract(3000))
        .with_step(subtract(45000))
        .with_step(subtract(2000))
        .calculate()                    # 32600
"""

import math
from numbers import Real
from typing import Callable, Final

from src.fluent.exceptions import InvalidArgument

# Максимальный процент вычета (100% = обнуление)
PERCENT_MAX: Final[float] = 100.0


def _validate_operand(operand: Real, label: str) -> None:
    if isinstance(operand, bool) or not isinstance(operand, Real):
        raise InvalidArgument(f"{label} must be a real number, got {operand!r}")
    if not math.isfinite(operand):
        raise InvalidArgument(f"{label} contains NaN/Inf: {operand}")


def _named(func: Callable, name: str) -> Callable:
    func.__name__ = name
    func.__qualname__ = name
    return func


def _format_operand(operand: Real) -> str:
    # 2400.0 -> "2400", 0.5 -> "0.5"
    if float(operand).is_integer():
        return str(int(operand))
    return str(operand)


def add(amount: Real) -> Callable[[Real], Real]:
    """Шаг: value + amount."""
    _validate_operand(amount, "amount")
    return _named(lambda value: value + amount, f"add_{_format_operand(amount)}")


def subtract(amount: Real) -> Callable[[Real], Real]:
    """
    Шаг: value - amount.

    Examples:
        >>> subtract(2400)(100000)
        97600
    """
    _validate_operand(amount, "amount")
    return _named(lambda value: value - amount, f"subtract_{_format_operand(amount)}")


def multiply(factor: Real) -> Callable[[Real], Real]:
    """Шаг: value * factor."""
    _validate_operand(factor, "factor")
    return _named(lambda value: value * factor, f"multiply_{_format_operand(factor)}")


def deduct_percent(percent: Real) -> Callable[[Real], Real]:
    """
    Шаг: value * (1 - percent / 100).

    Args:
        percent: Процент вычета в диапазоне [0, 100]

    Raises:
        InvalidArgument: если percent вне [0, 100] или NaN/Inf

    Examples:
        >>> deduct_percent(10)(2000)
        1800.0
    """
    _validate_operand(percent, "percent")
    if not 0.0 <= percent <= PERCENT_MAX:
        raise InvalidArgument(
            f"percent must be in [0, {PERCENT_MAX}], got {percent}"
        )
    fraction = percent / PERCENT_MAX
    return _named(
        lambda value: value * (1.0 - fraction),
        f"deduct_{_format_operand(percent)}_percent",
    )
