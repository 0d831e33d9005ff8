"""
Tests for payment field validation.
"""
import calendar
from decimal import Decimal

import pytest
from pydantic import ValidationError

from qrplatba.core.validators import (
    is_valid_account_number,
    is_valid_amount,
    is_valid_currency,
    is_valid_date,
    is_valid_digit_string,
    is_valid_string_length,
    validate,
)
from qrplatba.models.request import PaymentRequest
from qrplatba.models.response import ErrorKind


def test_is_valid_account_number():
    """Test account number format validation."""
    assert is_valid_account_number("123456789/0800") is True
    assert is_valid_account_number("19-2000145399/0800") is True
    assert is_valid_account_number("1/0800") is True
    assert is_valid_account_number("123456-123456789012/0800") is True

    assert is_valid_account_number("invalid") is False
    assert is_valid_account_number("123456789/123") is False
    assert is_valid_account_number("123456-123456789") is False
    assert is_valid_account_number("1234567-123456789/0800") is False
    assert is_valid_account_number(None) is False
    assert is_valid_account_number(123456789) is False


def test_is_valid_digit_string():
    """Test digit string validation."""
    assert is_valid_digit_string("1234", 4) is True
    assert is_valid_digit_string("1", 10) is True
    assert is_valid_digit_string("1234567890", 10) is True
    assert is_valid_digit_string(None, 10) is True
    assert is_valid_digit_string("", 10) is True

    assert is_valid_digit_string("12345", 4) is False
    assert is_valid_digit_string("abc", 10) is False
    assert is_valid_digit_string("12345678901", 10) is False
    assert is_valid_digit_string("12 34", 10) is False
    assert is_valid_digit_string(1234, 10) is False


def test_is_valid_date():
    """Test date validation."""
    assert is_valid_date("20250806") is True
    assert is_valid_date("20251231") is True
    assert is_valid_date("20250101") is True
    assert is_valid_date("20240229") is True
    assert is_valid_date(None) is True

    assert is_valid_date("2025-08-06") is False
    assert is_valid_date("20250832") is False
    assert is_valid_date("20251301") is False
    assert is_valid_date("20250230") is False
    assert is_valid_date("20230229") is False
    assert is_valid_date("20250000") is False
    assert is_valid_date("abcdefgh") is False
    assert is_valid_date("2025080") is False


def test_is_valid_date_accepts_every_day_of_a_year():
    """Every real calendar day written as YYYYMMDD is accepted."""
    for month in range(1, 13):
        for day in range(1, calendar.monthrange(2024, month)[1] + 1):
            assert is_valid_date(f"2024{month:02d}{day:02d}") is True


def test_is_valid_amount():
    """Test amount validation."""
    assert is_valid_amount(100) is True
    assert is_valid_amount(0.01) is True
    assert is_valid_amount(999999.99) is True
    assert is_valid_amount(Decimal("12.34")) is True

    assert is_valid_amount(0) is False
    assert is_valid_amount(-100) is False
    assert is_valid_amount(None) is False
    assert is_valid_amount(float("inf")) is False
    assert is_valid_amount(float("nan")) is False
    assert is_valid_amount(Decimal("NaN")) is False
    assert is_valid_amount("100") is False
    assert is_valid_amount(True) is False


def test_is_valid_currency():
    """Test currency code validation."""
    assert is_valid_currency("CZK") is True
    assert is_valid_currency("EUR") is True
    assert is_valid_currency("USD") is True

    assert is_valid_currency("INVALID") is False
    assert is_valid_currency("czk") is False
    assert is_valid_currency("") is False
    assert is_valid_currency(None) is False


def test_is_valid_currency_with_custom_set():
    assert is_valid_currency("GBP", currencies=["GBP"]) is True
    assert is_valid_currency("CZK", currencies=["GBP"]) is False


def test_is_valid_string_length():
    """Test string length validation."""
    assert is_valid_string_length(None, 250) is True
    assert is_valid_string_length("", 250) is True
    assert is_valid_string_length("x" * 250, 250) is True

    assert is_valid_string_length("x" * 251, 250) is False


def test_validate_mandatory_fields_only():
    """Test that a request with mandatory fields only is valid."""
    request = PaymentRequest(acc="123456789/0800", am=100.50, cc="CZK")

    assert validate(request) is None


def test_validate_all_fields():
    """Test that a request with all fields set is valid."""
    request = PaymentRequest(
        acc="123456789/0800",
        am=100.50,
        cc="CZK",
        vs="1234567890",
        ss="0987654321",
        ks="1234",
        dt="20250806",
        msg="Payment for services",
        rec="John Doe",
    )

    assert validate(request) is None


def test_validate_missing_mandatory_fields():
    """Test that missing mandatory fields are reported as required."""
    result = validate(PaymentRequest())

    assert result is not None
    assert set(result) == {"acc", "am", "cc"}
    for field in ("acc", "am", "cc"):
        assert result[field].error_kind == ErrorKind.REQUIRED
        assert result[field].message


def test_validate_empty_strings_are_missing():
    result = validate(PaymentRequest(acc="", am=100, cc=""))

    assert result["acc"].error_kind == ErrorKind.REQUIRED
    assert result["cc"].error_kind == ErrorKind.REQUIRED
    assert "am" not in result


def test_validate_reports_all_invalid_fields():
    """Test that every invalid field is reported in one pass."""
    request = PaymentRequest(
        acc="invalid",
        am=-100,
        cc="INVALID",
        vs="abc",
        ss="12345678901",
        ks="12345",
        dt="2025-08-06",
        msg="x" * 251,
        rec="y" * 251,
    )

    result = validate(request)

    assert set(result) == {"acc", "am", "cc", "vs", "ss", "ks", "dt", "msg", "rec"}
    assert all(error.error_kind == ErrorKind.FORMAT for error in result.values())


def test_validate_format_errors_with_valid_account():
    result = validate(PaymentRequest(acc="123456789/0800", am=-100, cc="INVALID", vs="abc"))

    assert set(result) == {"am", "cc", "vs"}
    assert result["am"].error_kind == ErrorKind.FORMAT
    assert result["cc"].error_kind == ErrorKind.FORMAT
    assert result["vs"].error_kind == ErrorKind.FORMAT


def test_validate_empty_optional_fields_pass():
    request = PaymentRequest(acc="1/0800", am=1, cc="EUR", vs="", ss="", ks="", dt="", msg="", rec="")

    assert validate(request) is None


def test_payment_request_is_immutable():
    request = PaymentRequest(acc="1/0800", am=1, cc="EUR")

    with pytest.raises(ValidationError):
        request.acc = "2/0800"


def test_payment_request_keeps_raw_values():
    """Test that values of the wrong type reach the validator instead of being rejected early."""
    request = PaymentRequest(acc=123, am="abc", cc=["CZK"], vs=12.5, msg=42)

    result = validate(request)

    assert set(result) == {"acc", "am", "cc", "vs", "msg"}
    assert all(error.error_kind == ErrorKind.FORMAT for error in result.values())


def test_payment_request_coerces_numbers():
    request = PaymentRequest(acc="1/0800", am="100.5", cc="CZK", vs=2024001, ks=308, dt=20250806)

    assert request.am == 100.5
    assert (request.vs, request.ks, request.dt) == ("2024001", "308", "20250806")
    assert validate(request) is None


def test_validate_empty_amount_is_required():
    result = validate(PaymentRequest(acc="1/0800", am="", cc="CZK"))

    assert result["am"].error_kind == ErrorKind.REQUIRED
