"""Option: immutable description of one declared option."""

import types
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from classopts.core.constraints import TypeConstraint
from classopts.core.undefined import Undefined
from classopts.schemas.settings import OptionSettings


class ComputedDefault:
    """Marks a callable default to be resolved against the owner object.

    Plain functions and lambdas are treated as computed defaults already;
    wrap other callables (bound methods, ``functools.partial``, callable
    instances) to get the same behaviour.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Any], Any]):
        if not callable(func):
            raise TypeError(f"computed default must be callable, got {func!r}")
        self.func = func

    def __call__(self, owner: Any) -> Any:
        return self.func(owner)

    def __repr__(self) -> str:
        return f"computed({self.func!r})"


def computed(func: Callable[[Any], Any]) -> ComputedDefault:
    """Declare ``func(owner)`` as an option's default."""
    return ComputedDefault(func)


def is_computed(default: Any) -> bool:
    return isinstance(default, (ComputedDefault, types.FunctionType))


@dataclass(frozen=True)
class Option:
    """One named option of a class.

    Attributes
    ----------
    name : str
        Option name, unique within its Definitions.
    type : Any
        Declared type constraint (see classopts.core.constraints).
    allow : tuple
        Allowed values. Empty means any value is allowed.
    reader : bool
        Whether an accessor is generated and the value bound on instances.
    default : Any
        Static default, computed default, or Undefined.
    """

    name: str
    type: Any = None
    allow: tuple = ()
    reader: bool = False
    default: Any = Undefined
    constraint: TypeConstraint = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "constraint", TypeConstraint(self.type))

    @classmethod
    def build(cls, name: str, settings: Optional[Mapping[str, Any]] = None) -> "Option":
        """Validate declaration settings and create the Option.

        Raises
        ------
        pydantic.ValidationError
            If settings contain an unknown key or an unusable value.
        """
        parsed = OptionSettings.model_validate(dict(settings or {}))
        return cls(
            name=name,
            type=parsed.type_,
            allow=parsed.allow,
            reader=parsed.reader,
            default=parsed.default,
        )

    @property
    def slot(self) -> str:
        """Instance attribute holding the bound reader value."""
        return f"_classopts_{self.name}"

    def type_matches(self, value: Any) -> bool:
        return self.constraint(value)

    def allowed(self, value: Any) -> bool:
        return not self.allow or value in self.allow

    def has_default(self) -> bool:
        return self.default is not Undefined

    def resolve_default(self, owner: Any) -> Any:
        """Return the default for ``owner``, calling it if it is computed."""
        if is_computed(self.default):
            return self.default(owner)
        return self.default

    def assign_reader_value(self, owner: Any, value: Any) -> None:
        owner.__dict__[self.slot] = value
