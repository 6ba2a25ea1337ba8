"""
Domain models для fluent.

Contains declarative chain recipes (ChainRecipe, StepSpec).
"""

from src.fluent.domain.recipe import ChainRecipe, StepOp, StepSpec

__all__ = [
    "ChainRecipe",
    "StepOp",
    "StepSpec",
]
