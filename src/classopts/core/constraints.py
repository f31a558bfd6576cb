"""Runtime type constraints for option values.

An option's ``type`` setting is compiled once, at declaration time, into a
TypeConstraint: a predicate object that accepts or rejects a value. Values
are never coerced.

Supported forms
---------------
None, object, typing.Any
    Accept anything.
class or tuple of classes
    ``isinstance`` check.
parametrized typing form (``list[int]``, ``Optional[str]``, ``Literal[...]``)
    Strict pydantic validation; the validated result is discarded.
any other callable
    Called with the value; truthy result accepts. A predicate raising
    TypeError or ValueError rejects the value.
"""

from typing import Any, Callable, get_origin

from pydantic import ConfigDict, TypeAdapter, ValidationError


class TypeConstraint:
    """Predicate deciding whether a value satisfies an option's type."""

    def __init__(self, spec: Any = None):
        self.spec = spec
        self._check = compile_constraint(spec)

    def __call__(self, value: Any) -> bool:
        return bool(self._check(value))

    def __repr__(self) -> str:
        return f"TypeConstraint({self.spec!r})"


def is_constraint_spec(spec: Any) -> bool:
    """Return True if ``spec`` can be compiled by compile_constraint()."""
    if spec is None or spec is Any or get_origin(spec) is not None:
        return True
    if isinstance(spec, type):
        return True
    if isinstance(spec, tuple):
        return len(spec) > 0 and all(isinstance(s, type) for s in spec)
    return callable(spec)


def compile_constraint(spec: Any) -> Callable[[Any], bool]:
    """Build the predicate function for a ``type`` setting.

    Parameters
    ----------
    spec : Any
        The declared ``type`` setting.

    Returns
    -------
    callable
        Function of one value returning True when the value is accepted.

    Raises
    ------
    TypeError
        If ``spec`` is none of the supported forms.
    """
    if spec is None or spec is object or spec is Any:
        return _accept_anything

    # Checked before isinstance(spec, type): some typing forms pass as classes
    if get_origin(spec) is not None:
        return _strict_adapter_check(spec)

    if isinstance(spec, type) or (isinstance(spec, tuple) and is_constraint_spec(spec)):
        return lambda value: isinstance(value, spec)

    if callable(spec):
        return _predicate_check(spec)

    raise TypeError(f"unsupported type constraint: {spec!r}")


def _accept_anything(value: Any) -> bool:
    return True


def _predicate_check(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        try:
            return bool(predicate(value))
        except (TypeError, ValueError):
            return False

    return check


def _strict_adapter_check(spec: Any) -> Callable[[Any], bool]:
    # Unknown classes inside the form are checked with isinstance
    adapter = TypeAdapter(spec, config=ConfigDict(arbitrary_types_allowed=True))

    def check(value: Any) -> bool:
        try:
            adapter.validate_python(value, strict=True)
        except ValidationError:
            return False
        return True

    return check
