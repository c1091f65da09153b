"""
Utility functions for the application.
"""
from typing import Any, Dict, Union
from datetime import date
from decimal import Decimal
import re

from sppd.core.exceptions import InvalidRangeError


Amount = Union[Decimal, int, str]

_NON_DIGITS = re.compile(r"\D")
_NOT_AMOUNT = re.compile(r"[^\d.,]")
_FRACTION = re.compile(r"[.,](\d{1,2})$")

# Indonesian number words for 0..11; everything above is composed from these
_WORDS = [
    "", "satu", "dua", "tiga", "empat", "lima",
    "enam", "tujuh", "delapan", "sembilan", "sepuluh", "sebelas",
]


def calculate_days(start_date: date, end_date: date) -> int:
    """
    Inclusive day count between two dates.
    A trip leaving and returning on the same day lasts 1 day.
    """
    if end_date < start_date:
        raise InvalidRangeError(start_date, end_date)
    return (end_date - start_date).days + 1


def parse_amount(value: Any) -> Decimal:
    """
    Parse a free-form amount such as "6.000.000", "Rp 6,000,000",
    "6.000.000,50", "6000000.00" or "".

    A separator followed by only one or two trailing digits is the decimal
    separator; every other "." or "," groups thousands. Blank or
    unparsable input yields 0.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))

    text = _NOT_AMOUNT.sub("", str(value)).strip(".,")
    fraction = _FRACTION.search(text)
    if fraction:
        whole = _NON_DIGITS.sub("", text[:fraction.start()]) or "0"
        return Decimal(f"{whole}.{fraction.group(1)}")
    digits = _NON_DIGITS.sub("", text)
    return Decimal(digits) if digits else Decimal(0)


def format_number(amount: Amount) -> str:
    """Group thousands with dots, e.g. 1200000 -> "1.200.000"."""
    value = int(Decimal(amount))
    sign = "-" if value < 0 else ""
    return sign + f"{abs(value):,}".replace(",", ".")


def _spell(n: int) -> str:
    if n < 12:
        return _WORDS[n]
    if n < 20:
        return f"{_spell(n - 10)} belas"
    if n < 100:
        return f"{_spell(n // 10)} puluh {_spell(n % 10)}"
    if n < 200:
        return f"seratus {_spell(n - 100)}"
    if n < 1000:
        return f"{_spell(n // 100)} ratus {_spell(n % 100)}"
    if n < 2000:
        return f"seribu {_spell(n - 1000)}"
    if n < 1_000_000:
        return f"{_spell(n // 1000)} ribu {_spell(n % 1000)}"
    if n < 1_000_000_000:
        return f"{_spell(n // 1_000_000)} juta {_spell(n % 1_000_000)}"
    if n < 1_000_000_000_000:
        return f"{_spell(n // 1_000_000_000)} milyar {_spell(n % 1_000_000_000)}"
    return f"{_spell(n // 1_000_000_000_000)} triliun {_spell(n % 1_000_000_000_000)}"


def amount_to_words(amount: Amount) -> str:
    """
    Spell out a whole-rupiah amount in Indonesian ("terbilang").
    Fractions are dropped; printed receipts only carry whole rupiah.
    """
    value = int(Decimal(amount))
    if value == 0:
        return "nol"
    words = " ".join(_spell(abs(value)).split())
    return f"minus {words}" if value < 0 else words


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
