"""
Conversion of Czech domestic account numbers to IBAN.
"""
import re

ACCOUNT_NUMBER_PATTERN = re.compile(r"(?:(\d+)-)?(\d{1,10})/(\d{4})", re.ASCII)
COUNTRY_CODE = "CZ"
ACCOUNT_LENGTH = 16


class FormatError(ValueError):
    """Raised when an account number does not match the expected notation."""


def _to_digits(value: str) -> str:
    # A -> 10, B -> 11, ..., Z -> 35
    return "".join(str(ord(char) - 55) if char.isalpha() else char for char in value)


def _mod97(digits: str) -> int:
    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + int(digit)) % 97
    return remainder


def account_number_to_iban(account_number: str) -> str:
    """
    Convert a Czech account number to IBAN format.

    Args:
        account_number: Account number in format "prefix-number/bankCode" or "number/bankCode"

    Returns:
        str: 24 character IBAN without spaces (e.g., CZ6508000000192000145399)

    Raises:
        FormatError: If the account number format is invalid
    """
    match = ACCOUNT_NUMBER_PATTERN.fullmatch(account_number) if isinstance(account_number, str) else None
    if not match:
        raise FormatError(f"Invalid account number format: {account_number!r}")

    prefix, number, bank_code = match.groups()
    if len((prefix or "") + number) > ACCOUNT_LENGTH:
        raise FormatError(f"Account number does not fit into {ACCOUNT_LENGTH} digits: {account_number!r}")

    padded_account = ((prefix or "") + number).zfill(ACCOUNT_LENGTH)

    # Country code and zeroed check digits move to the end for the MOD 97-10 check
    rearranged = f"{bank_code}{padded_account}{COUNTRY_CODE}00"
    check_digits = f"{98 - _mod97(_to_digits(rearranged)):02d}"

    return f"{COUNTRY_CODE}{check_digits}{bank_code}{padded_account}"
