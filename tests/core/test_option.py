"""Tests for Option: queries, defaults and reader binding."""

import dataclasses
import functools

import pytest
from pydantic import ValidationError

pytestmark = pytest.mark.unit

from classopts.core import Option, Undefined, computed


class Owner:
    """Minimal stand-in for an object under construction."""

    def __init__(self, label="owner"):
        self.label = label


class TestBuild:
    """Option.build() validates declaration settings."""

    def test_build_without_settings_uses_permissive_defaults(self):
        """No settings means any type, any value, no reader, no default."""
        opt = Option.build("anything")
        assert opt.name == "anything"
        assert opt.type is None
        assert opt.allow == ()
        assert opt.reader is False
        assert opt.default is Undefined

    def test_build_copies_settings(self):
        """Validated settings end up on the Option."""
        opt = Option.build("admin", {"allow": [True, False], "reader": True, "default": False})
        assert opt.allow == (True, False)
        assert opt.reader is True
        assert opt.default is False

    def test_build_rejects_unknown_setting(self):
        """Misspelled settings fail validation."""
        with pytest.raises(ValidationError):
            Option.build("name", {"defualt": 1})


class TestImmutability:
    """Options never change after creation."""

    def test_option_is_frozen(self):
        """Assigning to an Option attribute fails."""
        opt = Option("name", type=str)
        with pytest.raises(dataclasses.FrozenInstanceError):
            opt.name = "other"


class TestTypeAndAllow:
    """type_matches() and allowed() checks."""

    def test_type_defaults_to_anything(self):
        """Without a type every value matches."""
        opt = Option("value")
        assert opt.type_matches(None)
        assert opt.type_matches([1, 2])

    def test_type_matches_declared_class(self):
        """A declared class restricts matching values."""
        opt = Option("name", type=str)
        assert opt.type_matches("Piotr")
        assert not opt.type_matches(1)

    def test_empty_allow_accepts_everything(self):
        """An empty allow set places no restriction."""
        assert Option("value").allowed("whatever")

    def test_allow_restricts_values(self):
        """Only listed values are allowed."""
        opt = Option("mode", allow=("fast", "slow"))
        assert opt.allowed("fast")
        assert not opt.allowed("medium")


class TestDefaults:
    """has_default() and resolve_default()."""

    def test_no_default(self):
        """Options declared without default report none."""
        assert not Option("name").has_default()

    @pytest.mark.parametrize("value", [None, False, 0, "", [], {}])
    def test_zero_like_defaults_are_still_defaults(self, value):
        """Falsy defaults are distinguished from a missing default."""
        opt = Option("value", default=value)
        assert opt.has_default()
        assert opt.resolve_default(Owner()) == value

    def test_static_default_is_returned_as_is(self):
        """Static defaults are returned without copying."""
        marker = ["shared"]
        assert Option("value", default=marker).resolve_default(Owner()) is marker

    def test_lambda_default_is_computed_from_owner(self):
        """Lambda defaults are called with the owner."""
        opt = Option("label", default=lambda owner: owner.label.upper())
        assert opt.resolve_default(Owner("abc")) == "ABC"

    def test_computed_wrapper_for_other_callables(self):
        """computed() marks partials and other callables as computed."""
        def join(sep, owner):
            return sep.join([owner.label, owner.label])

        opt = Option("label", default=computed(functools.partial(join, "-")))
        assert opt.resolve_default(Owner("x")) == "x-x"

    def test_classes_are_static_defaults(self):
        """A class given as default is not called."""
        assert Option("kind", default=dict).resolve_default(Owner()) is dict

    def test_computed_requires_callable(self):
        """computed() rejects non-callables."""
        with pytest.raises(TypeError):
            computed("not callable")


class TestReaderBinding:
    """assign_reader_value() stores into the per-instance slot."""

    def test_value_is_stored_in_slot(self):
        """The value lands in the option's reserved instance attribute."""
        opt = Option("name", reader=True)
        owner = Owner()
        opt.assign_reader_value(owner, "Piotr")
        assert opt.slot == "_classopts_name"
        assert owner.__dict__["_classopts_name"] == "Piotr"

    def test_slot_does_not_clobber_private_attribute(self):
        """An owner's own _name attribute survives reader binding."""
        opt = Option("name", reader=True)
        owner = Owner()
        owner._name = "private"
        opt.assign_reader_value(owner, "Piotr")
        assert owner._name == "private"
