"""The Undefined sentinel.

Marks "no default was declared" for an option. None, False and empty
collections are all valid defaults, so absence cannot be signalled by any
of them.
"""


class _UndefinedType:
    """Singleton type of Undefined. Never equal to any user value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Undefined"


Undefined = _UndefinedType()
