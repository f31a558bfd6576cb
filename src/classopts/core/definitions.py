"""Definitions: ordered registry of the options declared on a class.

A Definitions object is class-level state. It is created once for the
``Options`` root, cloned for every subclass when the subclass is created,
and only grows through explicit declarations. Processing an input mapping
never modifies the registry itself.
"""

import logging
from typing import Any, Dict, Iterator, List, MutableMapping, Optional

from classopts.core.option import Option
from classopts.errors import InvalidOptionKeyError, InvalidOptionValueError

logger = logging.getLogger(__name__)


class Definitions:
    """Manage all available options of one class.

    **Inheritance:**

    ``clone()`` returns a new registry holding the same Option objects, so a
    subclass may add or override options without touching its parent::

        child_defs = parent_defs.clone()
        child_defs.define(Option("verbose", default=False))
        "verbose" in parent_defs    # False

    **Processing:**

    ``process(owner, options)`` checks, completes and applies one input
    mapping for one object under construction. See ``process`` below.
    """

    def __init__(self, options: Optional[Dict[str, Option]] = None):
        self._options: Dict[str, Option] = dict(options or {})

    def clone(self) -> "Definitions":
        return type(self)(self._options)

    def __copy__(self) -> "Definitions":
        return self.clone()

    def define(self, option: Option) -> Option:
        """Register ``option``. A previous option with the same name is replaced."""
        if option.name in self._options:
            logger.debug("Overriding option: %s", option.name)
        self._options[option.name] = option
        return option

    def names(self) -> List[str]:
        return list(self._options)

    def get(self, name: str) -> Optional[Option]:
        return self._options.get(name)

    def __getitem__(self, name: str) -> Option:
        return self._options[name]

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()!r})"

    def process(self, owner: Any, options: MutableMapping[str, Any]) -> None:
        """Validate ``options`` for ``owner``, filling in defaults in place.

        Steps
        -----
        1. Every key of ``options`` must be declared, otherwise
           InvalidOptionKeyError is raised before anything else happens.
        2. For each declared option, in declaration order:

           - a missing option with a default gets its default (computed
             defaults are called with ``owner``)
           - a present value must match the type constraint and then the
             allow set, otherwise InvalidOptionValueError is raised
           - a reader option binds its value (None when absent) on ``owner``

        Because options are handled in declaration order, a computed default
        may read the accessors of options declared before it.

        Parameters
        ----------
        owner : object
            The object under construction.
        options : mutable mapping
            Caller options. Mutated in place: defaults are inserted.

        Raises
        ------
        InvalidOptionKeyError
            If ``options`` contains an undeclared key.
        InvalidOptionValueError
            At the first option whose value is rejected.
        """
        self._ensure_known_options(options)

        for name, option in self._options.items():
            if option.has_default() and name not in options:
                options[name] = option.resolve_default(owner)

            if name in options:
                self._validate_option_value(option, options[name])

            if option.reader:
                option.assign_reader_value(owner, options.get(name))

        logger.debug("Processed options for %s: %s", type(owner).__name__, list(options))

    def _ensure_known_options(self, options: MutableMapping[str, Any]) -> None:
        for name in options:
            if name not in self._options:
                raise InvalidOptionKeyError(name)

    @staticmethod
    def _validate_option_value(option: Option, value: Any) -> None:
        if not option.type_matches(value):
            raise InvalidOptionValueError(option.name, value, "type")

        if not option.allowed(value):
            raise InvalidOptionValueError(option.name, value, "value")
