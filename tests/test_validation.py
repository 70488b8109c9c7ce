"""Validator registry tests."""

import pytest

from pyreportops import (
    InvalidDateError,
    Operator,
    Query,
    UnknownValidatorError,
    ValidationError,
    register_validator,
)
from pyreportops.validation import _VALIDATORS, get_validator, run_validators, validate_dates


class TestValidateDates:
    def test_accepts_iso_dates(self):
        validate_dates(["2024-01-01", "2024-12-31 23:59:59"])

    def test_accepts_blank(self):
        validate_dates(["", None, "   "])

    @pytest.mark.parametrize("value", ["01/02/2024", "2024-13-01", "yesterday", "2024-1-1"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidDateError):
            validate_dates([value])

    def test_error_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_dates(["nope"])
        assert str(exc_info.value) == "invalid date value"
        assert "'nope'" in exc_info.value.internal()
        assert isinstance(exc_info.value.wrapped, ValueError)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_dates(["nope"])


class TestRegistry:
    def test_dates_registered(self):
        assert get_validator("dates") is validate_dates

    def test_unknown(self):
        with pytest.raises(UnknownValidatorError, match="unknown validator"):
            get_validator("colours")

    def test_register_custom_validator(self):
        def positive(values):
            for value in values:
                if int(value) <= 0:
                    raise ValidationError("must be positive", f"{value!r} is not positive")

        register_validator("positive", positive)
        try:
            op = Operator(">0", validate="positive", sql_operator=">")
            assert op.apply(Query(), "hours", "3").sql == "hours > '3'"
            with pytest.raises(ValidationError, match="must be positive"):
                op.apply(Query(), "hours", "-1")
        finally:
            _VALIDATORS.pop("positive")

    def test_run_validators_in_order(self):
        seen = []
        register_validator("first", lambda values: seen.append("first"))
        register_validator("second", lambda values: seen.append("second"))
        try:
            run_validators(["second", "first"], ["x"])
            assert seen == ["second", "first"]
        finally:
            _VALIDATORS.pop("first")
            _VALIDATORS.pop("second")
