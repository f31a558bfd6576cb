"""`classopts` - declared, validated construction options for Python classes.

Subpackages:
- core: Option, Definitions, type constraints, Undefined sentinel
- schemas: Pydantic schema for option declaration settings

Modules:
- options: the Options mixin and the ``option()`` declaration helper
- errors: option error hierarchy
"""

from classopts.core import Definitions, Option, Undefined, computed
from classopts.errors import (
    InvalidOptionKeyError,
    InvalidOptionValueError,
    OptionDeclarationError,
    OptionError,
)
from classopts.options import Options, option
from classopts.schemas import OptionSettings

__version__ = "0.1.0"

__all__ = [
    'Options',
    'option',
    'computed',
    'Option',
    'Definitions',
    'Undefined',
    'OptionSettings',
    'OptionError',
    'InvalidOptionKeyError',
    'InvalidOptionValueError',
    'OptionDeclarationError',
]
