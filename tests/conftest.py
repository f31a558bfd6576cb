"""Root-level pytest fixtures for classopts test suite.

Provides freshly declared option classes so that no test can leak option
declarations into another.
"""

import pytest

from classopts import Options, option


@pytest.fixture
def user_class():
    """The canonical User example: a typed reader and an allow-listed default."""

    class User(Options):
        name = option(type=str, reader=True)
        admin = option(allow=[True, False], reader=True, default=False)

    return User


@pytest.fixture
def make_class():
    """Factory fixture creating an Options subclass from option settings.

    Examples
    --------
    >>> def test_flag(make_class):
    ...     Flagged = make_class(flag=dict(default=True, reader=True))
    ...     assert Flagged().flag is True
    """
    def _make(base=Options, **declarations):
        cls = type("Configured", (base,), {})
        for name, settings in declarations.items():
            cls.declare_option(name, **settings)
        return cls

    return _make
