"""
SequenceWrapper — fluent-обёртка над упорядоченной последовательностью

Цепочка операций:
    from_sequence(items).filter(pred).transform(fn).to_sequence()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обёрнутая последовательность никогда не мутирует (хранится как tuple)
2. Каждая filter/transform возвращает НОВЫЙ экземпляр
3. Порядок элементов сохраняется (stable)
4. Исключения из predicate/mapper пропагируют без изменений
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

from src.fluent.exceptions import InvalidArgument

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class SequenceWrapper(Generic[T]):
    """
    Immutable обёртка над упорядоченной последовательностью.

    Прямой конструктор, from_sequence() и SequenceWrapper.of() одинаково
    проверяют аргумент и материализуют элементы в tuple.
    """

    _items: Tuple[T, ...]

    def __post_init__(self):
        object.__setattr__(self, "_items", _materialize(self._items))

    @classmethod
    def of(cls, sequence: Iterable[T]) -> "SequenceWrapper[T]":
        """Alias для from_sequence()."""
        return from_sequence(sequence)

    def filter(self, predicate: Callable[[T], bool]) -> "SequenceWrapper[T]":
        """
        Новый wrapper с элементами, для которых predicate(element) истинно.

        Args:
            predicate: Чистая функция T -> bool

        Returns:
            Новый SequenceWrapper (может быть пустым)

        Examples:
            >>> from_sequence([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).to_sequence()
            [2, 4]
        """
        return SequenceWrapper(tuple(item for item in self._items if predicate(item)))

    def transform(self, mapper: Callable[[T], U]) -> "SequenceWrapper[U]":
        """
        Новый wrapper с mapper(element) для каждого элемента.

        Длина и порядок сохраняются, тип элементов может измениться.

        Examples:
            >>> from_sequence([1, 2, 3]).transform(str).to_sequence()
            ['1', '2', '3']
        """
        return SequenceWrapper(tuple(mapper(item) for item in self._items))

    def to_sequence(self) -> List[T]:
        """Терминальная операция: новый list с текущими элементами."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SequenceWrapper({list(self._items)!r})"


def _materialize(sequence: Iterable[Any]) -> Tuple[Any, ...]:
    if sequence is None:
        raise InvalidArgument("Sequence must not be None")
    if isinstance(sequence, tuple):
        return sequence

    try:
        iterator = iter(sequence)
    except TypeError as e:
        raise InvalidArgument(
            f"Sequence must be iterable, got {type(sequence).__name__}"
        ) from e

    return tuple(iterator)


def from_sequence(sequence: Iterable[Any]) -> SequenceWrapper[Any]:
    """
    Создание SequenceWrapper из упорядоченной последовательности.

    Args:
        sequence: Любой iterable (list, tuple, generator, ...)

    Returns:
        SequenceWrapper с материализованной копией элементов

    Raises:
        InvalidArgument: если sequence is None или не итерируем
    """
    return SequenceWrapper(sequence)
