"""Option errors: fail-fast enforcement of declared options.

All errors raised while declaring options or constructing an object with
options derive from OptionError. Construction fails once, at the first
problem found; there is no partial object and no recovery path.

Key distinction:
- InvalidOptionKeyError: caller passed a key the class never declared
- InvalidOptionValueError: caller passed a value the option rejects
- OptionDeclarationError: the class itself declared an unusable option
"""

from typing import Any, Type


class OptionError(ValueError):
    """Base class for every error raised by the options mechanism."""
    pass


class InvalidOptionKeyError(OptionError):
    """Raised when an input mapping contains an undeclared option name.

    Checked against the whole input before any default is computed or any
    value is validated, so a single bad key rejects the whole construction.
    """

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"{name!r} is not a valid option")


class InvalidOptionValueError(OptionError):
    """Raised when a value fails its option's type constraint or allow set."""

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name!r}:{value!r} has incorrect {reason}")


class OptionDeclarationError(OptionError):
    """Raised at class-declaration time for an option that cannot exist."""
    pass


def require(condition: bool, message: str, error: Type[OptionError] = OptionError) -> None:
    """Enforce an option invariant.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.
    message : str
        Error message used when the invariant does not hold.
    error : type
        OptionError subclass to raise. Default: OptionError.

    Raises
    ------
    OptionError
        If condition is False.

    Examples
    --------
    >>> require(name.isidentifier(), f"{name!r} is not an identifier", OptionDeclarationError)
    """
    if not condition:
        raise error(message)
