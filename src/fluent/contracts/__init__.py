"""
Contract Validation Module

Модуль для валидации JSON контрактов recipe.
"""

from .validators import (
    ChainRecipeValidator,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    load_chain_recipe,
    validate_chain_recipe,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChainRecipeValidator",
    # Functions
    "get_schema_loader",
    "validate_chain_recipe",
    "load_chain_recipe",
]
