"""Options mixin for classes whose constructor accepts an options mapping.

Example
-------
    class User(Options):
        name = option(type=str, reader=True)
        admin = option(allow=[True, False], reader=True, default=False)

    user = User(name="Piotr")
    user.name       # 'Piotr'
    user.admin      # False
    user.options    # mappingproxy({'name': 'Piotr', 'admin': False})

Options may also be declared after the class body::

    User.declare_option("email", type=str, reader=True)

Reader values live in the instance attribute ``_classopts_<name>``;
that prefix is reserved for the mechanism.

Classes taking their own positional arguments pass the options mapping on::

    class Command(Options):
        strict = option(default=True, reader=True)

        def __init__(self, relation, options=None, **kwargs):
            self.relation = relation
            super().__init__(options, **kwargs)
"""

import logging
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional

from classopts.core.definitions import Definitions
from classopts.core.option import Option
from classopts.errors import OptionDeclarationError, require

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({"options", "option_definitions", "declare_option"})


class OptionField:
    """Class-body placeholder created by ``option()``.

    Replaced during class creation by the generated accessor, or removed
    when the option has no reader.
    """

    __slots__ = ("settings",)

    def __init__(self, settings: Mapping[str, Any]):
        self.settings = dict(settings)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.settings.items())
        return f"option({args})"


def option(**settings: Any) -> OptionField:
    """Declare an option in a class body.

    Parameters
    ----------
    type : constraint, optional
        Restrict option type. Default: accept anything.
    reader : bool, optional
        Define a read-only accessor. Default: False.
    allow : collection, optional
        Allow only certain values. Default: allow anything.
    default : Any, optional
        Value for a missing option; functions are called with the instance.
    """
    return OptionField(settings)


def _make_reader(opt: Option) -> property:
    slot = opt.slot

    def reader(self):
        return self.__dict__.get(slot)

    reader.__name__ = opt.name
    reader.__qualname__ = opt.name
    return property(reader, doc=f"Value of the {opt.name!r} option.")


class Options:
    """Mixin adding declared, validated construction options to a class."""

    option_definitions: ClassVar[Definitions] = Definitions()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.option_definitions = cls.option_definitions.clone()
        logger.debug(
            "Inherited %d option(s) into %s", len(cls.option_definitions), cls.__qualname__
        )

        fields = [(k, v) for k, v in vars(cls).items() if isinstance(v, OptionField)]
        for name, field in fields:
            delattr(cls, name)
            cls.declare_option(name, **field.settings)

    @classmethod
    def declare_option(cls, name: str, **settings: Any) -> Option:
        """Define an option on this class and, for readers, its accessor.

        Redeclaring an existing name, including an inherited one, replaces
        it on this class only.

        Raises
        ------
        OptionDeclarationError
            If ``name`` is not an identifier or is reserved.
        pydantic.ValidationError
            If ``settings`` are invalid.
        """
        require(
            isinstance(name, str) and name.isidentifier(),
            f"option name must be an identifier, got {name!r}",
            OptionDeclarationError,
        )
        require(
            name not in RESERVED_NAMES,
            f"{name!r} is reserved and cannot be used as an option name",
            OptionDeclarationError,
        )

        opt = cls.option_definitions.define(Option.build(name, settings))
        if opt.reader:
            setattr(cls, name, _make_reader(opt))
        logger.debug("Declared option %s.%s", cls.__qualname__, name)
        return opt

    def __init__(self, options: Optional[Mapping[str, Any]] = None, /, **kwargs: Any):
        merged = dict(options) if options else {}
        for key in kwargs:
            if key in merged:
                raise TypeError(f"option {key!r} given both in mapping and as keyword")
        merged.update(kwargs)

        type(self).option_definitions.process(self, merged)
        self._options = MappingProxyType(merged)

    @property
    def options(self) -> Mapping[str, Any]:
        """Resolved option values (read-only)."""
        return self._options
