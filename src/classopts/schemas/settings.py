"""OptionSettings: the settings accepted by an option declaration.

Validates the keyword settings of ``declare_option`` / ``option(...)``
before an Option is built. Unknown setting names are rejected, so a typo
such as ``defualt=`` fails at class-declaration time instead of being
silently ignored.

Recognized settings
-------------------
type : constraint, optional
    Restrict option type. Default: accept anything.
allow : collection, optional
    Allow only these values. Default: allow anything.
reader : bool, optional
    Generate a read-only accessor. Default: False.
default : Any, optional
    Value used for a missing option. Plain functions and ``computed(...)``
    wrappers are called with the object under construction.
"""

from typing import Any

from pydantic import Field, StrictBool, field_validator

from classopts.core.constraints import is_constraint_spec
from classopts.core.undefined import Undefined
from classopts.schemas.base import ClassoptsBaseModel


class OptionSettings(ClassoptsBaseModel):
    """Validated settings of one option declaration.

    Usage
    -----
        settings = OptionSettings.model_validate({"type": str, "reader": True})
        settings.type_      # <class 'str'>
        settings.default    # Undefined
    """

    type_: Any = Field(None, alias="type")
    allow: tuple[Any, ...] = ()
    reader: StrictBool = False
    default: Any = Undefined

    @field_validator("type_")
    @classmethod
    def check_type_constraint(cls, v):
        """Only accept constraint forms the mechanism can compile."""
        if not is_constraint_spec(v):
            raise ValueError(f"unsupported type constraint: {v!r}")
        return v

    @field_validator("allow", mode="before")
    @classmethod
    def reject_string_allow(cls, v):
        """A bare string is not a collection of allowed values."""
        if isinstance(v, (str, bytes)):
            raise ValueError("allow must be a collection of values, not a string")
        return v
