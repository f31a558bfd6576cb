"""Core option machinery: Option, Definitions and the Undefined sentinel."""

from classopts.core.undefined import Undefined
from classopts.core.constraints import TypeConstraint
from classopts.core.option import ComputedDefault, Option, computed
from classopts.core.definitions import Definitions

__all__ = [
    'Undefined',
    'TypeConstraint',
    'ComputedDefault',
    'Option',
    'computed',
    'Definitions',
]
