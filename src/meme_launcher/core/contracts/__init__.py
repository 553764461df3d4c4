"""
Contract Validation Module

Модуль для валидации JSON контрактов meme-launcher.
"""

from .validators import (
    BuyTokensValidator,
    ContractValidator,
    InitializeLaunchValidator,
    LaunchRecordValidator,
    SchemaLoader,
    validate_buy_tokens,
    validate_initialize_launch,
    validate_launch_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InitializeLaunchValidator",
    "BuyTokensValidator",
    "LaunchRecordValidator",
    # Functions
    "validate_initialize_launch",
    "validate_buy_tokens",
    "validate_launch_record",
]
