"""
ChainRecipe — декларативное описание CompositionChain

Immutable Pydantic модели, соответствующие контракту
contracts/schema/chain_recipe.json.

Recipe позволяет конфигурировать набор шагов без кода: отключённый шаг
(enabled=False) эквивалентен отсутствию соответствующего with_step().
"""

import math
from enum import Enum
from typing import Callable, Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from src.fluent.composition import CompositionChain, from_value
from src.fluent.exceptions import InvalidArgument
from src.fluent.logger import logger
from src.fluent.steps import add, deduct_percent, multiply, subtract


# =============================================================================
# ENUMS
# =============================================================================


class StepOp(str, Enum):
    """Тип арифметического шага"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DEDUCT_PERCENT = "deduct_percent"


_STEP_FACTORIES: Dict[StepOp, Callable] = {
    StepOp.ADD: add,
    StepOp.SUBTRACT: subtract,
    StepOp.MULTIPLY: multiply,
    StepOp.DEDUCT_PERCENT: deduct_percent,
}


# =============================================================================
# MODELS
# =============================================================================


class StepSpec(BaseModel):
    """Один шаг recipe."""

    name: str = Field(..., min_length=1, description="Уникальное имя шага (например, 'income_tax')")
    op: StepOp = Field(..., description="Тип операции")
    operand: float = Field(..., description="Аргумент операции")
    enabled: bool = Field(default=True, description="False → шаг пропускается")

    model_config = {"frozen": True}

    @field_validator("operand")
    @classmethod
    def validate_operand_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"operand contains NaN/Inf: {v}")
        return v

    @model_validator(mode="after")
    def validate_operand_for_op(self) -> "StepSpec":
        """Operand должен быть допустим для фабрики op (например, percent в [0, 100])."""
        try:
            self.to_function()
        except InvalidArgument as e:
            raise ValueError(f"step {self.name!r}: {e}") from e
        return self

    def to_function(self) -> Callable[[float], float]:
        """Step-функция для CompositionChain.with_step()."""
        return _STEP_FACTORIES[self.op](self.operand)


class ChainRecipe(BaseModel):
    """
    Recipe: стартовое значение + упорядоченный список шагов.

    Порядок шагов = порядок применения (left-to-right).
    """

    initial_value: float = Field(..., description="Стартовое значение chain")
    steps: List[StepSpec] = Field(default_factory=list, description="Шаги в порядке применения")

    model_config = {"frozen": True}

    @field_validator("initial_value")
    @classmethod
    def validate_initial_value_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"initial_value contains NaN/Inf: {v}")
        return v

    @field_validator("steps")
    @classmethod
    def validate_unique_names(cls, v: List[StepSpec]) -> List[StepSpec]:
        names = [step.name for step in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate step names: {duplicates}")
        return v

    def enabled_steps(self) -> List[StepSpec]:
        return [step for step in self.steps if step.enabled]

    def to_functions(self) -> List[Callable[[float], float]]:
        """Step-функции включённых шагов в порядке применения."""
        return [step.to_function() for step in self.enabled_steps()]

    def build_chain(self) -> CompositionChain:
        """CompositionChain с одним with_step() на каждый включённый шаг."""
        chain = from_value(self.initial_value)
        for function in self.to_functions():
            chain = chain.with_step(function)

        logger.debug(
            "Built chain from recipe: initial_value=%s, steps=%d/%d",
            self.initial_value,
            chain.step_count,
            len(self.steps),
        )
        return chain

    def calculate(self) -> float:
        return self.build_chain().calculate()

    def without(self, name: str) -> "ChainRecipe":
        """
        Новый recipe с отключённым шагом name.

        Raises:
            InvalidArgument: если шаг name отсутствует
        """
        if name not in {step.name for step in self.steps}:
            raise InvalidArgument(f"Unknown step: {name!r}")

        steps = [
            step.model_copy(update={"enabled": False}) if step.name == name else step
            for step in self.steps
        ]
        return self.model_copy(update={"steps": steps})
