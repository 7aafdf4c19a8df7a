"""Tests for the typed check adapters."""

import re
from decimal import Decimal

import pytest

from vouch import check, is_, reset_messages
from vouch.validators import any_value, boolean, number, optional_bool, string


@pytest.fixture(autouse=True)
def clean_catalog():
    reset_messages()
    yield
    reset_messages()


def messages(session, name="value_0"):
    return session.errors().messages(name)


# =============================================================================
# String
# =============================================================================


class TestString:
    def test_comparisons_valid(self):
        session = check(
            string("running").equal_to("running"),
            string("bb").greater_than("ba"),
            string("bc").greater_or_equal_to("bc"),
            string("bb").less_than("bc"),
            string("bc").less_or_equal_to("bc"),
            string("b").between("a", "c"),
        )
        assert session.valid()

    def test_comparisons_invalid(self):
        session = check(string("aa").greater_than("ba").less_than("a").equal_to("b"))

        assert messages(session) == [
            'Value 0 must be greater than "ba"',
            'Value 0 must be less than "a"',
            'Value 0 must be equal to "b"',
        ]

    def test_between_invalid(self):
        session = is_(string("z", "section").between("a", "c"))
        assert messages(session, "section") == ['Section must be between "a" and "c"']

    def test_not_equal_to(self):
        session = is_(string("idle", "status").not_().equal_to("idle"))
        assert messages(session, "status") == ['Status can\'t be equal to "idle"']

    def test_empty_and_blank(self):
        assert is_(string("").empty()).valid()
        assert not is_(string(" ").empty()).valid()
        assert is_(string(" ").blank()).valid()
        assert messages(is_(string("a").blank())) == ["Value 0 must be blank"]

    def test_in_slice(self):
        options = ["idle", "paused", "stopped"]
        assert is_(string("idle").in_slice(options)).valid()
        assert messages(is_(string("running", "status").in_slice(options)), "status") == [
            "Status is not valid"
        ]

    def test_matching_to_accepts_strings_and_patterns(self):
        assert is_(string("pre-approved").matching_to("pre-.+")).valid()
        assert is_(string("pre-approved").matching_to(re.compile("pre-.+"))).valid()
        assert messages(is_(string("approved").matching_to("^pre-"))) == [
            'Value 0 must match to "^pre-"'
        ]

    def test_lengths(self):
        assert check(
            string("myname").max_length(6).min_length(6).length(6).length_between(2, 6)
        ).valid()

        session = check(string("myname", "slug").max_length(3).min_length(8).length_between(1, 2))
        assert messages(session, "slug") == [
            'Slug must not have a length longer than "3"',
            'Slug must not have a length shorter than "8"',
            'Slug must have a length between "1" and "2"',
        ]

    def test_passing(self):
        assert is_(string("abc").passing(lambda v: v.startswith("a"))).valid()
        assert messages(is_(string("abc").passing(lambda v: v.startswith("z")))) == [
            "Value 0 is not valid"
        ]

    def test_custom_template(self):
        session = is_(string("", "email").not_().blank(template="Please enter {{title}}"))
        assert messages(session, "email") == ["Please enter Email"]


# =============================================================================
# Number
# =============================================================================


class TestNumber:
    def test_comparisons_valid(self):
        session = check(
            number(10).equal_to(10),
            number(10).greater_than(9),
            number(10).greater_or_equal_to(10),
            number(10.5).less_than(11),
            number(10).less_or_equal_to(10),
            number(Decimal("1.5")).between(1, 2),
        )
        assert session.valid()

    def test_between_invalid(self):
        session = is_(number(5, "age").between(10, 20))
        assert messages(session, "age") == ['Age must be between "10" and "20"']

    def test_float_formatting(self):
        session = is_(number(1.5).equal_to(2.25))
        assert messages(session) == ['Value 0 must be equal to "2.25"']

    def test_sign_checks(self):
        assert check(number(0).zero(), number(1).positive(), number(-1).negative()).valid()

        session = check(number(-1, "balance").zero().positive().not_().negative())
        assert messages(session, "balance") == [
            "Balance must be zero",
            "Balance must be positive",
            "Balance can't be negative",
        ]

    def test_in_slice_and_passing(self):
        assert is_(number(2).in_slice([1, 2, 3]).passing(lambda v: v % 2 == 0)).valid()
        assert messages(check(number(3).in_slice([1, 2]).passing(lambda v: v % 2 == 0))) == [
            "Value 0 is not valid",
            "Value 0 is not valid",
        ]


# =============================================================================
# Boolean
# =============================================================================


class TestBoolean:
    def test_not(self):
        session = is_(boolean(True).not_().equal_to(False))
        assert session.valid()

    def test_equal_to(self):
        assert is_(boolean(True).equal_to(True)).valid()
        assert is_(boolean(False).equal_to(False)).valid()
        assert messages(is_(boolean(True).equal_to(False))) == ['Value 0 must be equal to "false"']

    def test_true_and_false(self):
        assert check(boolean(True).true(), boolean(False).false()).valid()

        session = check(boolean(False, "active").true(), boolean(True, "deleted").false())
        assert messages(session, "active") == ["Active must be true"]
        assert messages(session, "deleted") == ["Deleted must be false"]

    def test_negated_true(self):
        session = is_(boolean(True, "active").not_().true())
        assert messages(session, "active") == ["Active must not be true"]


class TestOptionalBool:
    def test_none_fails_value_checks(self):
        session = check(optional_bool(None, "active").true().false().equal_to(True))

        assert messages(session, "active") == [
            "Active must be true",
            "Active must be false",
            'Active must be equal to "true"',
        ]

    def test_nil(self):
        assert is_(optional_bool(None).nil()).valid()
        assert messages(is_(optional_bool(True).nil())) == ["Value 0 must be nil"]
        assert messages(is_(optional_bool(None).not_().nil())) == ["Value 0 must not be nil"]

    def test_values(self):
        assert check(
            optional_bool(True).true().equal_to(True),
            optional_bool(False).false().not_().nil(),
        ).valid()


# =============================================================================
# Any value
# =============================================================================


class TestAnyValue:
    @pytest.mark.parametrize("value", [10, -10, 10.1, -10.1, Decimal("1.5")])
    def test_a_number_type_valid(self, value):
        session = is_(any_value(value).a_number_type())
        assert session.valid()

    @pytest.mark.parametrize("value", ["1", "1.1", True, [10], None])
    def test_a_number_type_invalid(self, value):
        session = is_(any_value(value).a_number_type())

        assert len(session.errors()) == 1
        assert messages(session) == ["Value 0 must be a number type"]

    def test_equal_to_and_nil(self):
        assert check(any_value([1]).equal_to([1]), any_value(None).nil()).valid()

        session = check(any_value({"a": 1}, "payload").nil().equal_to({}))
        assert messages(session, "payload") == [
            "Payload must be nil",
            'Payload must be equal to ""',
        ]
