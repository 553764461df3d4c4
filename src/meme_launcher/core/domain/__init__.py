"""
Domain models and value objects.

Contains the Launch record, the mint capability, unit conversions and the
error taxonomy.
"""

from meme_launcher.core.domain.authority import (
    MINT_AUTHORITY_SEED,
    MintAuthority,
    derive_mint_authority,
)
from meme_launcher.core.domain.errors import (
    AccountNotFound,
    AuthenticationError,
    InsufficientFunds,
    InvalidInstruction,
    InvalidPriceCalculation,
    InvalidSupplyUpdate,
    LaunchAlreadyExists,
    LaunchError,
    LaunchInactive,
    LaunchNotFound,
    LedgerError,
    MintAlreadyExists,
    MintNotFound,
    StorageConflict,
    UnauthorizedMintAuthority,
)
from meme_launcher.core.domain.launch import (
    NAME_MAX_BYTES,
    SYMBOL_MAX_BYTES,
    Launch,
    LaunchState,
)
from meme_launcher.core.domain.units import (
    LAMPORTS_PER_SOL,
    MINT_DECIMALS,
    base_units_to_ui,
    lamports_to_sol,
)

__all__ = [
    # Launch model
    "Launch",
    "LaunchState",
    "NAME_MAX_BYTES",
    "SYMBOL_MAX_BYTES",
    # Mint capability
    "MINT_AUTHORITY_SEED",
    "MintAuthority",
    "derive_mint_authority",
    # Units
    "LAMPORTS_PER_SOL",
    "MINT_DECIMALS",
    "base_units_to_ui",
    "lamports_to_sol",
    # Errors
    "LaunchError",
    "LaunchInactive",
    "InvalidPriceCalculation",
    "InvalidSupplyUpdate",
    "InvalidInstruction",
    "LaunchNotFound",
    "LaunchAlreadyExists",
    "StorageConflict",
    "AuthenticationError",
    "LedgerError",
    "InsufficientFunds",
    "MintAlreadyExists",
    "MintNotFound",
    "UnauthorizedMintAuthority",
    "AccountNotFound",
]
