"""Pydantic schemas for option declarations.

Exports
-------
ClassoptsBaseModel : class
    Strict base model shared by classopts schemas
OptionSettings : class
    Validated settings of a single option declaration
"""

from classopts.schemas.base import ClassoptsBaseModel
from classopts.schemas.settings import OptionSettings

__all__ = [
    'ClassoptsBaseModel',
    'OptionSettings',
]
