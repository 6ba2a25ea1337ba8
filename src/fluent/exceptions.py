"""
Exceptions — иерархия ошибок fluent

Таксономия ошибок:
- InvalidArgument: отсутствующий/невалидный аргумент конструирования
  (исходная последовательность, стартовое значение, step-функция)
- StepFailure: любые исключения из пользовательских predicate/mapper/step.
  Отдельного класса нет: такие исключения НЕ оборачиваются и НЕ подавляются,
  а пропагируют без изменений к вызову, который инициировал вычисление.
"""


class FluentError(Exception):
    """Базовое исключение пакета fluent."""
    pass


class InvalidArgument(FluentError, ValueError):
    """
    Обязательный аргумент отсутствует (None) или невалиден.

    Возникает синхронно в точке конструирования, экземпляр wrapper/chain
    при этом не создаётся. Наследует ValueError для совместимости с
    кодом, который ловит стандартные ошибки валидации.
    """
    pass
