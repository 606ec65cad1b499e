"""Tests for string, integer, float and boolean validators."""

import re

import pytest

from dataknobs_fieldchain import boolean, float_, integer, string


class TestStringValidator:
    """Test string validation."""

    def test_type_check(self):
        """Test that non-strings are rejected."""
        assert string().validate("hello") == "hello"
        assert string().try_validate(123).errors == ["Value must be a string"]

    def test_coercion(self):
        """Test coercion of numbers and booleans to strings."""
        assert string().coerce().validate(42) == "42"
        assert string().coerce().validate(1.5) == "1.5"
        assert string().coerce().validate(True) == "true"

    def test_lengths(self):
        """Test length constraints."""
        validator = string().min_length(2).max_length(4)
        assert validator.validate("abc") == "abc"
        assert validator.try_validate("a").errors == ["Value must be at least 2 characters long"]
        assert validator.try_validate("abcde").errors == ["Value must be at most 4 characters long"]
        assert string().length(3).try_validate("ab").errors == [
            "Value must be exactly 3 characters long"
        ]

    def test_negative_length_rejected(self):
        """Test that negative bounds are configuration errors."""
        with pytest.raises(ValueError):
            string().min_length(-1)
        with pytest.raises(ValueError):
            string().length(-1)

    def test_not_empty(self):
        """Test not_empty on an empty string."""
        assert string().not_empty().try_validate("").errors == ["Value must not be empty"]

    def test_pattern(self):
        """Test regex patterns given as strings and compiled patterns."""
        assert string().pattern(r"^\d{3}$").validate("123") == "123"
        assert not string().pattern(r"^\d{3}$").try_validate("12a").accepted
        assert string().regex(re.compile(r"b")).validate("abc") == "abc"

    def test_email(self):
        """Test the email format."""
        validator = string().email()
        assert validator.validate("test@example.com") == "test@example.com"
        assert validator.try_validate("invalid").errors == ["Value must be a valid email address"]

    def test_url(self):
        """Test the url format."""
        assert string().url().try_validate("https://example.com/path").accepted
        assert not string().url().try_validate("example").accepted

    def test_uuid(self):
        """Test the uuid format."""
        assert string().uuid().try_validate("123e4567-e89b-12d3-a456-426614174000").accepted
        assert not string().uuid().try_validate("123e4567").accepted

    def test_uuid_versions(self):
        """Test uuid restricted to a version."""
        v4 = "123e4567-e89b-42d3-a456-426614174000"
        assert string().uuid(4).try_validate(v4).accepted
        assert string().uuid(1).try_validate(v4).errors == ["Value must be a valid UUID version 1"]
        assert not string().uuid(4).try_validate("not-a-uuid").accepted
        with pytest.raises(ValueError):
            string().uuid(6)

    def test_ip_versions(self):
        """Test ip formats with and without a version."""
        assert string().ip().try_validate("192.168.0.1").accepted
        assert string().ip().try_validate("::1").accepted
        assert string().ip(4).try_validate("10.0.0.1").accepted
        assert not string().ip(4).try_validate("::1").accepted
        assert string().ip(6).try_validate("::1").accepted
        with pytest.raises(ValueError):
            string().ip(5)

    def test_hex_and_base64(self):
        """Test hex and base64 formats."""
        assert string().hex().try_validate("deadBEEF").accepted
        assert not string().hex().try_validate("xyz").accepted
        assert string().base64().try_validate("aGVsbG8=").accepted
        assert not string().base64().try_validate("not base64!").accepted
        assert string().base64(urlsafe=True).try_validate("_-8").accepted

    def test_dates_and_times(self):
        """Test date, datetime and time formats."""
        assert string().date().try_validate("2024-02-29").accepted
        assert not string().date().try_validate("2023-02-29").accepted
        assert string().date("%d/%m/%Y").try_validate("31/12/2024").accepted
        assert string().datetime().try_validate("2024-01-01T10:30:00").accepted
        assert string().time().try_validate("23:59").accepted
        assert not string().time().try_validate("24:00").accepted

    def test_hostname_and_domain(self):
        """Test hostname and domain formats."""
        assert string().hostname().try_validate("localhost").accepted
        assert not string().hostname().try_validate("-bad-").accepted
        assert string().domain().try_validate("example.com").accepted
        assert not string().domain().try_validate("localhost").accepted

    def test_unknown_format(self):
        """Test that an unknown format name is a configuration error."""
        from dataknobs_common import NotFoundError

        with pytest.raises(NotFoundError):
            string().format("no-such-format")


class TestOneOf:
    """Test allowed-values restrictions."""

    def test_allowed_values(self):
        """Test the immediate check and its default message."""
        validator = string().one_of(["a", "b"])
        assert validator.validate("a") == "a"
        assert validator.try_validate("c").errors == ['Value must be one of: ["a", "b"]']

    def test_exact_equality(self):
        """Test that type matters when comparing allowed values."""
        validator = integer().one_of([1, 2])
        assert validator.validate(1) == 1
        assert not validator.try_validate(True).accepted
        assert not float_().one_of([1.0]).try_validate(1).accepted

    def test_checked_before_type(self):
        """Test that the immediate check runs before the type check."""
        validator = integer().one_of([1, 2], "Pick 1 or 2")
        assert validator.try_validate("1").errors == ["Pick 1 or 2"]

    def test_checked_after_coercion(self):
        """Test that coerced input is compared."""
        assert integer().coerce().one_of([1, 2]).validate("2") == 2

    def test_queued_after_transformations(self):
        """Test that one_of after a transformation checks the transformed value."""
        validator = string().transform(len).one_of([3], "Need three")
        assert validator.validate("abc") == 3
        assert validator.try_validate("ab").errors == ["Need three"]

    def test_absent_skips_check(self):
        """Test that absent values are not checked."""
        assert tuple(string().one_of(["a"]).try_validate(None)) == (True, None, None)

    def test_empty_values_rejected(self):
        """Test configuration error for no allowed values."""
        with pytest.raises(ValueError):
            string().one_of([])


class TestIntegerValidator:
    """Test integer validation."""

    def test_type_check(self):
        """Test that only ints (not bools or floats) pass."""
        assert integer().validate(5) == 5
        assert integer().try_validate(True).errors == ["Value must be an integer"]
        assert not integer().try_validate(1.5).accepted

    def test_coercion(self):
        """Test coercion of numeric strings."""
        validator = integer().coerce()
        assert validator.validate("123") == 123
        assert validator.validate(" -7 ") == -7
        assert validator.validate("3.0") == 3
        assert validator.validate(4.0) == 4
        assert validator.try_validate("1.5").errors == ["Value must be an integer"]
        assert validator.try_validate("abc").errors == ["Value must be an integer"]

    def test_bounds(self):
        """Test min, max and their aliases."""
        assert integer().min(18).try_validate(16).errors == ["Value must be at least 18"]
        assert integer().max(10).try_validate(11).errors == ["Value must be at most 10"]
        assert integer().gt(0).try_validate(0).errors == ["Value must be greater than 0"]
        assert integer().lt(0).try_validate(0).errors == ["Value must be less than 0"]
        assert integer().gte(0).validate(0) == 0
        assert integer().lte(0).validate(0) == 0

    def test_between(self):
        """Test inclusive ranges."""
        validator = integer().between(1, 10)
        assert validator.validate(1) == 1
        assert validator.validate(10) == 10
        assert validator.try_validate(11).errors == ["Value must be between 1 and 10"]
        with pytest.raises(ValueError):
            integer().between(10, 1)

    def test_signs(self):
        """Test sign helpers."""
        assert integer().positive().try_validate(0).errors == ["Value must be positive"]
        assert integer().negative().try_validate(0).errors == ["Value must be negative"]
        assert integer().non_negative().validate(0) == 0
        assert integer().non_positive().try_validate(1).errors == ["Value must be non-positive"]

    def test_multiple_of(self):
        """Test divisibility."""
        assert integer().multiple_of(5).validate(15) == 15
        assert integer().multiple_of(5).try_validate(7).errors == ["Value must be a multiple of 5"]
        with pytest.raises(ValueError):
            integer().multiple_of(0)

    def test_clamp_to_range(self):
        """Test clamping as a transformation."""
        validator = integer().clamp_to_range(0, 10)
        assert validator.validate(-5) == 0
        assert validator.validate(50) == 10
        assert validator.validate(5) == 5

    def test_clamp_invalid_range(self):
        """Test that an inverted clamp range is a configuration error."""
        with pytest.raises(ValueError, match="Minimum cannot be greater than maximum for clamp"):
            integer().clamp_to_range(10, 0)


class TestFloatValidator:
    """Test float validation."""

    def test_type_check(self):
        """Test that ints are widened and bools rejected."""
        assert float_().validate(3.5) == 3.5
        result = float_().validate(5)
        assert result == 5.0 and isinstance(result, float)
        assert float_().try_validate(False).errors == ["Value must be a float"]

    def test_coercion(self):
        """Test coercion of numeric strings."""
        assert float_().coerce().validate("3.14") == 3.14
        assert float_().coerce().validate("1e3") == 1000.0
        assert not float_().coerce().try_validate("pi").accepted

    def test_float_multiple_of(self):
        """Test divisibility with float tolerance."""
        assert float_().multiple_of(0.1).try_validate(0.3).accepted
        assert not float_().multiple_of(0.25).try_validate(0.3).accepted


class TestBooleanValidator:
    """Test boolean validation."""

    def test_type_check(self):
        """Test that only bools pass."""
        assert boolean().validate(False) is False
        assert boolean().try_validate(1).errors == ["Value must be a boolean"]

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("On", True), ("1", True), (1, True),
         ("false", False), ("off", False), ("0", False), (0, False)],
    )
    def test_coercion(self, raw, expected):
        """Test coercion of form values."""
        assert boolean().coerce().validate(raw) is expected

    def test_unrecognized_input_fails(self):
        """Test that unrecognized input is reported, not guessed."""
        assert boolean().coerce().try_validate("yes").errors == ["Value must be a boolean"]
        assert boolean().coerce().validate("") is None


class TestOversizedNumbers:
    """Test that numbers beyond conversion limits are reported, not raised."""

    def test_huge_integer_string(self):
        """Test integer coercion of a numeric string with thousands of digits."""
        accepted, _, errors = integer().coerce().try_validate("1" * 5000)
        assert accepted or errors == ["Value must be an integer"]

    def test_huge_integer_to_string(self):
        """Test string coercion of an integer with thousands of digits."""
        accepted, _, errors = string().coerce().try_validate(10**5000)
        assert accepted or errors == ["Value must be a string"]

    def test_huge_integer_to_boolean(self):
        """Test boolean coercion of a huge integer."""
        assert boolean().coerce().try_validate(10**5000).errors == ["Value must be a boolean"]

    def test_float_overflow_with_coercion(self):
        """Test float coercion of an integer too large for a float."""
        assert float_().coerce().try_validate(10**400).errors == ["Value must be a float"]

    def test_float_overflow_without_coercion(self):
        """Test the float type check on an integer too large for a float."""
        assert float_().try_validate(10**400).errors == ["Value must be a float"]

    def test_multiple_of_overflow(self):
        """Test divisibility checks on values a float cannot hold."""
        assert integer().multiple_of(0.5).try_validate(10**400).errors == [
            "Value must be a multiple of 0.5"
        ]
        assert not float_().coerce().multiple_of(0.5).try_validate("1e400").accepted
