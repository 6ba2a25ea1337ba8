"""
CompositionChain — ленивая left-to-right композиция унарных функций

Цепочка:
    from_value(100000).with_step(f1).with_step(f2).calculate() == f2(f1(100000))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Стартовое значение фиксировано на всё время жизни chain
2. Шаги только добавляются в конец (and_then), не удаляются
3. Никаких вычислений до calculate()
4. calculate() идемпотентен и не мутирует chain
5. Ноль шагов → identity → стартовое значение без изменений
6. Глубина стека не зависит от числа шагов (шаги применяются циклом)

Эквивалентная реализация через fold:
    compose_all([f1, ..., fn])(v) == reduce(lambda acc, f: f(acc), [f1, ..., fn], v)
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar

from src.fluent.exceptions import InvalidArgument

T = TypeVar("T")

Step = Callable[[Any], Any]


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def identity(x: T) -> T:
    """Identity function: seed для fold и функция chain без шагов."""
    return x


def and_then(first: Step, second: Step) -> Step:
    """
    Left-to-right композиция: сначала first, затем second.

    Examples:
        >>> and_then(lambda x: x + 1, lambda x: x * 10)(1)
        20
    """
    def composed(x):
        return second(first(x))

    return composed


def _run_steps(value: Any, steps: Tuple[Step, ...]) -> Any:
    # Fold по значению: один кадр стека на шаг, без вложенных замыканий
    return reduce(lambda acc, step: step(acc), steps, value)


def _require_callable(step: Any) -> None:
    if not callable(step):
        raise InvalidArgument(
            f"Step must be callable, got {type(step).__name__}"
        )


def _validated_steps(steps: Iterable[Step]) -> Tuple[Step, ...]:
    if steps is None:
        raise InvalidArgument("Steps must not be None")

    steps = tuple(steps)
    for step in steps:
        _require_callable(step)
    return steps


def compose_all(steps: Iterable[Step]) -> Step:
    """
    Композиция упорядоченной последовательности унарных функций.

    Эквивалент reduce(and_then, steps, identity), но результат — одна
    функция, применяющая шаги циклом. Пустая последовательность
    возвращает identity.

    Raises:
        InvalidArgument: если steps is None или содержит не-callable
    """
    steps = _validated_steps(steps)
    if not steps:
        return identity

    def composed(x):
        return _run_steps(x, steps)

    return composed


def apply_all(value: Any, steps: Iterable[Step]) -> Any:
    """
    Применение steps к value слева направо через fold.

    Результат совпадает с from_value(value).with_step(f1)...calculate().

    Examples:
        >>> apply_all(10, [lambda x: x - 1, lambda x: x * 2])
        18
    """
    if value is None:
        raise InvalidArgument("Value must not be None")
    return compose_all(steps)(value)


# =============================================================================
# COMPOSITION CHAIN
# =============================================================================


@dataclass(frozen=True)
class CompositionChain(Generic[T]):
    """
    Immutable chain: стартовое значение + упорядоченные шаги.

    Каждый with_step() возвращает новый экземпляр; исходный chain остаётся
    пригодным для повторного использования как шаблон. Равенство —
    по (value, steps).
    """

    value: T
    steps: Tuple[Step, ...] = field(default=())

    def __post_init__(self):
        if self.value is None:
            raise InvalidArgument("Value must not be None")
        object.__setattr__(self, "steps", _validated_steps(self.steps))

    @classmethod
    def of(cls, value: T) -> "CompositionChain[T]":
        """Alias для from_value()."""
        return from_value(value)

    @property
    def function(self) -> Step:
        """Накопленная функция (identity при нуле шагов)."""
        return compose_all(self.steps)

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def with_step(self, step: Step) -> "CompositionChain[T]":
        """
        Новый chain с шагом step в конце.

        Вычисление не выполняется.

        Raises:
            InvalidArgument: если step не callable
        """
        _require_callable(step)
        return CompositionChain(value=self.value, steps=self.steps + (step,))

    def calculate(self) -> T:
        """
        Терминальная операция: шаги применяются к value по порядку.

        Исключения из step-функций пропагируют без изменений.
        """
        return _run_steps(self.value, self.steps)

    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "__name__", None) or repr(s) for s in self.steps)
        return f"CompositionChain(value={self.value!r}, steps=[{names}])"


def from_value(value: T) -> CompositionChain[T]:
    """
    Создание chain со стартовым значением и без шагов.

    Raises:
        InvalidArgument: если value is None
    """
    return CompositionChain(value=value)
