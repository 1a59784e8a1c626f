"""
Enum Utilities for VARCHAR-based Selector Fields

ARCHITECTURE STANDARD:
━━━━━━━━━━━━━━━━━━━━━━
• Database: VARCHAR(50) - NOT a database ENUM
• SQLAlchemy: String(50) with Mapped[str]
• Pydantic: Python Enum for API validation
• API Response: Use string directly (NO .value needed)
• Case: All enum values stored in UPPERCASE

DATA FLOW:
━━━━━━━━━━
INPUT (API Request):
    Pydantic Enum → .value → String → Database
    Example: AllocationMode.PICK → "PICK" → VARCHAR

OUTPUT (API Response):
    Database → String → Return directly
    Example: VARCHAR "PICK" → "PICK" (no conversion needed)

CASE NORMALIZATION:
━━━━━━━━━━━━━━━━━━━
Use normalize_to_uppercase() or create_uppercase_validator()
to accept case-insensitive input while storing UPPERCASE.
"""

from enum import Enum
from typing import Any, Type, Set


def enum_values(enum_class: Type[Enum]) -> list:
    """Get all values from an enum class."""
    return [e.value for e in enum_class]


def enum_comment(enum_class: Type[Enum]) -> str:
    """
    Generate a comment string for VARCHAR column.

    Examples:
        >>> enum_comment(AllocationMode)
        'PICK, PUT'
    """
    return ", ".join(enum_values(enum_class))


def normalize_to_uppercase(value: Any, valid_values: Set[str]) -> Any:
    """
    Normalize a string value to UPPERCASE if it's a valid enum value.

    Returns the original value otherwise, so Pydantic raises the error.

    Examples:
        >>> normalize_to_uppercase('pick', {'PICK', 'PUT'})
        'PICK'
        >>> normalize_to_uppercase('invalid', {'PICK', 'PUT'})
        'invalid'
    """
    if value is None:
        return value
    if isinstance(value, str):
        upper_v = value.strip().upper()
        if upper_v in valid_values:
            return upper_v
    return value


def normalize_list_to_uppercase(values: Any, valid_values: Set[str]) -> Any:
    """List version of normalize_to_uppercase()."""
    if not isinstance(values, (list, tuple)):
        return values
    return [normalize_to_uppercase(v, valid_values) for v in values]


def create_uppercase_validator(field_name: str, valid_values: Set[str]) -> classmethod:
    """
    Create a Pydantic field_validator that normalizes values to UPPERCASE.

    Usage:
        class MySchema(BaseModel):
            mode: AllocationMode

            normalize_mode = create_uppercase_validator('mode', VALID_ALLOCATION_MODES)
    """
    from pydantic import field_validator

    @field_validator(field_name, mode='before')
    @classmethod
    def validate(cls, v):
        if isinstance(v, (list, tuple)):
            return normalize_list_to_uppercase(v, valid_values)
        return normalize_to_uppercase(v, valid_values)

    return validate


# =============================================================================
# PRE-DEFINED VALID VALUE SETS
# =============================================================================

VALID_ALLOCATION_MODES = {"PICK", "PUT"}

VALID_TASK_SEQUENCE_TOKENS = {
    "OUTBOUND_REPLEN", "OUTBOUND_PICK", "OUTBOUND_LOAD", "OUTBOUND_PACK",
    "OUTBOUND_SHIP", "OUTBOUND_SPECIAL", "HAZMAT_PROCESS", "QUALITY_CHECK",
}

VALID_SEARCH_SCOPES = {"AREA", "ZONE", "BIN", "LOCATION", "WH"}

VALID_STATE_PREFERENCES = {"PURE", "IMPURE", "EMPTY", "SKU_EMPTY", "RESERVED", "BLOCKED"}

VALID_BATCH_PREFERENCE_MODES = {
    "NONE", "FIFO", "LIFO", "EXPIRY", "BATCH_NUMBER", "CLOSEST_PREVIOUS",
}

VALID_OPTIMIZATION_MODES = {"TOUCH", "DISTANCE", "TIME", "COST", "EFFICIENCY"}

VALID_HU_KINDS = {"NONE", "PALLET", "CARTON", "TOTE", "BAG", "ROLL", "CONTAINER", "AUTO"}

VALID_LOADING_UNITS = {"CRATE", "PALLET", "BOX", "TOTE", "CONTAINER", "CART"}
