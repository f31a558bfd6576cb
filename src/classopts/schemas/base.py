"""Base Pydantic model with strict defaults for classopts schemas.

All classopts schemas inherit from this base to ensure consistent
validation behavior for option declarations.
"""

from pydantic import BaseModel, ConfigDict


class ClassoptsBaseModel(BaseModel):
    """Base model for all classopts schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Immutable after construction
    - Fields may be populated by name or by alias
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown settings
        frozen=True,              # Settings never change once declared
        populate_by_name=True,    # Allow both 'type' and 'type_'
    )
