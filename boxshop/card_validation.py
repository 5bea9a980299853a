"""Credit-card number, security code and expiry checks."""

from __future__ import annotations

import re
from datetime import date

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    found = _LEADING_INT.match(text)
    return int(found.group(1)) if found else 0


def valid_number(number: int) -> bool:
    """Check length, issuer prefix and Luhn sum of a card number.

    Thirteen-digit numbers are always accepted.
    """
    if number <= 0:
        return False
    digits = [int(c) for c in str(number)]
    count = len(digits)
    if count not in (13, 15, 16):
        return False

    checksum = 0
    for position, digit in enumerate(reversed(digits)):
        if position % 2 == 1:
            digit *= 2
        checksum += digit % 10 + digit // 10 % 10
    luhn_ok = checksum % 10 == 0
    leading, second = digits[0], digits[1]

    if count == 13:
        return True
    if count == 15:
        return leading == 3 and luhn_ok and second in (4, 7)
    if leading == 4 and luhn_ok:
        return True
    return leading == 5 and luhn_ok and second in (1, 2, 3, 4, 5)


def valid_csv(csv: str) -> bool:
    """Accept a security code whose leading integer lies in 0..999."""
    return 0 <= _atoi(csv) <= 999


def valid_date(month: int, year: int, today: date | None = None) -> bool:
    """Accept an expiry month strictly after the current one."""
    today = today or date.today()
    current_year = today.year % 100 + 2000
    if year == current_year and month <= today.month:
        return False
    if not 1 <= month <= 12:
        return False
    return year >= current_year


def validate_card(
    number: str, month: int, year: int, csv: str, today: date | None = None
) -> bool:
    """Run the number, security code and expiry checks together."""
    return valid_number(_atoi(number)) and valid_csv(csv) and valid_date(month, year, today)