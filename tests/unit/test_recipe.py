"""
Тесты для ChainRecipe / StepSpec (Pydantic)

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Построение CompositionChain из recipe
3. enabled=False эквивалентно отсутствию шага
4. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.fluent import InvalidArgument
from src.fluent.domain import ChainRecipe, StepOp, StepSpec


@pytest.fixture
def deductions_recipe() -> ChainRecipe:
    """Recipe сценария 100000 → 32600."""
    return ChainRecipe(
        initial_value=100000,
        steps=[
            StepSpec(name="pension", op=StepOp.SUBTRACT, operand=2400),
            StepSpec(name="income_tax", op=StepOp.SUBTRACT, operand=15000),
            StepSpec(name="health", op=StepOp.SUBTRACT, operand=3000),
            StepSpec(name="rent", op=StepOp.SUBTRACT, operand=45000),
            StepSpec(name="union_fee", op=StepOp.SUBTRACT, operand=2000),
        ],
    )


# =============================================================================
# STEP SPEC TESTS
# =============================================================================


class TestStepSpec:
    """Тесты для модели StepSpec"""

    def test_defaults(self):
        step = StepSpec(name="tax", op="subtract", operand=10)
        assert step.op == StepOp.SUBTRACT
        assert step.enabled is True

    def test_to_function(self):
        assert StepSpec(name="x", op=StepOp.MULTIPLY, operand=3).to_function()(4) == 12
        assert StepSpec(name="y", op=StepOp.DEDUCT_PERCENT, operand=50).to_function()(10) == 5

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            StepSpec(name="", op=StepOp.ADD, operand=1)

    def test_unknown_op_rejected(self):
        with pytest.raises(ValidationError):
            StepSpec(name="x", op="divide", operand=1)

    def test_nan_operand_rejected(self):
        with pytest.raises(ValidationError, match="NaN/Inf"):
            StepSpec(name="x", op=StepOp.ADD, operand=float("nan"))

    @pytest.mark.parametrize("operand", [-0.01, 100.5, 150])
    def test_percent_out_of_range_rejected(self, operand):
        with pytest.raises(ValidationError, match="percent must be in"):
            StepSpec(name="discount", op=StepOp.DEDUCT_PERCENT, operand=operand)

    def test_percent_bounds_accepted(self):
        assert StepSpec(name="a", op=StepOp.DEDUCT_PERCENT, operand=0).to_function()(10) == 10
        assert StepSpec(name="b", op=StepOp.DEDUCT_PERCENT, operand=100).to_function()(10) == 0

    def test_large_subtract_operand_accepted(self):
        assert StepSpec(name="c", op=StepOp.SUBTRACT, operand=150).to_function()(200) == 50

    def test_frozen(self):
        step = StepSpec(name="x", op=StepOp.ADD, operand=1)
        with pytest.raises(ValidationError):
            step.operand = 2


# =============================================================================
# CHAIN RECIPE TESTS
# =============================================================================


class TestChainRecipe:
    """Тесты для модели ChainRecipe"""

    def test_calculate(self, deductions_recipe):
        assert deductions_recipe.calculate() == 32600

    def test_build_chain(self, deductions_recipe):
        chain = deductions_recipe.build_chain()
        assert chain.step_count == 5
        assert chain.calculate() == 32600

    def test_empty_steps(self):
        assert ChainRecipe(initial_value=42, steps=[]).calculate() == 42

    def test_without_last_step(self, deductions_recipe):
        reduced = deductions_recipe.without("union_fee")
        assert reduced.calculate() == 34600
        assert reduced.build_chain().step_count == 4
        # исходный recipe не изменился
        assert deductions_recipe.calculate() == 32600

    def test_without_middle_step(self, deductions_recipe):
        assert deductions_recipe.without("rent").calculate() == 77600

    def test_without_unknown_step(self, deductions_recipe):
        with pytest.raises(InvalidArgument, match="Unknown step"):
            deductions_recipe.without("bonus")

    def test_disabled_step_skipped(self):
        recipe = ChainRecipe(
            initial_value=10,
            steps=[
                StepSpec(name="a", op=StepOp.ADD, operand=5),
                StepSpec(name="b", op=StepOp.MULTIPLY, operand=2, enabled=False),
            ],
        )
        assert recipe.calculate() == 15
        assert [s.name for s in recipe.enabled_steps()] == ["a"]

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate step names"):
            ChainRecipe(
                initial_value=1,
                steps=[
                    StepSpec(name="a", op=StepOp.ADD, operand=1),
                    StepSpec(name="a", op=StepOp.ADD, operand=2),
                ],
            )

    def test_nan_initial_value_rejected(self):
        with pytest.raises(ValidationError, match="NaN/Inf"):
            ChainRecipe(initial_value=float("inf"), steps=[])

    def test_json_roundtrip(self, deductions_recipe):
        restored = ChainRecipe.model_validate_json(deductions_recipe.model_dump_json())
        assert restored == deductions_recipe
        assert restored.calculate() == 32600
