"""
South African ID numbers.

An ID number is 13 digits laid out as YYMMDD SSSS C A Z:

    YYMMDD  date of birth; YY > 50 is the 1900s, otherwise the 2000s
    SSSS    sequence number, 0000-4999 for females and 5000-9999 for males
    C       0 for SA citizens, 1 for permanent residents
    A       historically race, now unused
    Z       Luhn check digit over the whole number
"""

import enum
import logging
import re
import typing as t
from datetime import date

from pydantic import BaseModel, ConfigDict

from said.util.enum import CaseInsensitiveEnum

logger = logging.getLogger("said-id")

ID_LENGTH = 13
CENTURY_CUTOFF = 50
MALE_CODE_START = 5000

_ID_FORMAT = re.compile(rf"[0-9]{{{ID_LENGTH}}}")


class Gender(CaseInsensitiveEnum):
    FEMALE = enum.auto()
    MALE = enum.auto()
    UNKNOWN = enum.auto()


class Citizenship(CaseInsensitiveEnum):
    CITIZEN = enum.auto()
    PERMANENT_RESIDENT = enum.auto()


_CITIZENSHIP_DIGITS = {
    "0": Citizenship.CITIZEN,
    "1": Citizenship.PERMANENT_RESIDENT,
}


class IDDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    date_of_birth: date
    gender: Gender
    citizenship: Citizenship


def _luhn_sum(digits: str) -> int:
    # Rightmost digit is left as is, then every second digit moving left is doubled
    total = 0
    for i, d in enumerate(reversed(digits)):
        n = int(d)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total


def is_luhn_valid(id_number: str) -> bool:
    """
    Check a string of digits, including its trailing check digit, against the Luhn algorithm.
    """
    if not id_number.isascii() or not id_number.isdigit():
        return False
    return _luhn_sum(id_number) % 10 == 0


def luhn_check_digit(partial: str) -> int:
    """
    Return the check digit which, appended to `partial`, gives a Luhn-valid number.
    """
    if not partial.isascii() or not partial.isdigit():
        raise ValueError("Luhn input must be digits")
    return (10 - _luhn_sum(partial + "0") % 10) % 10


def _has_id_format(id_number: str | None) -> t.TypeGuard[str]:
    return id_number is not None and _ID_FORMAT.fullmatch(id_number) is not None


def _resolve_birth_date(id_number: str) -> date:
    year = int(id_number[0:2])
    month = int(id_number[2:4])
    day = int(id_number[4:6])
    year += 1900 if year > CENTURY_CUTOFF else 2000
    return date(year, month, day)


def _has_valid_birth_date(id_number: str) -> bool:
    try:
        _resolve_birth_date(id_number)
    except ValueError:
        return False
    return True


def _gender_code(id_number: str) -> int:
    return int(id_number[6:10])


def _has_valid_gender_code(id_number: str) -> bool:
    # Always holds for a well formed number, but guards against the format check being loosened
    code = id_number[6:10]
    return len(code) == 4 and code.isdigit() and 0 <= _gender_code(id_number) <= 9999


def _has_valid_citizenship(id_number: str) -> bool:
    return id_number[10] in _CITIZENSHIP_DIGITS


_CHECKS = (
    ("birth date", _has_valid_birth_date),
    ("gender code", _has_valid_gender_code),
    ("citizenship", _has_valid_citizenship),
    ("checksum", is_luhn_valid),
)


def is_valid(id_number: str | None) -> bool:
    """
    Whether `id_number` is a valid South African ID number. Missing, empty or otherwise malformed input is simply
    invalid; this never raises.
    """
    if not _has_id_format(id_number):
        logger.debug("ID number rejected: format")
        return False

    for name, check in _CHECKS:
        if not check(id_number):
            # Don't log the number itself, it is personal information
            logger.debug("ID number rejected: %s", name)
            return False
    return True


def classify_gender(id_number: str | None) -> Gender:
    """
    Gender encoded in the sequence digits. Only requires the number to be well formed, so it will classify numbers
    that fail the date, citizenship or checksum checks.
    """
    if not _has_id_format(id_number):
        return Gender.UNKNOWN
    return Gender.MALE if _gender_code(id_number) >= MALE_CODE_START else Gender.FEMALE


def birth_date(id_number: str) -> date:
    """
    Date of birth encoded in the ID number, raising ValueError if it is malformed or not a real date.
    """
    if not _has_id_format(id_number):
        raise ValueError("RSA ID not well formed")
    return _resolve_birth_date(id_number)


def parse_id(id_number: str) -> IDDetails:
    """
    Parse details from an RSA ID Number, raising ValueError if it is not valid
    """
    id_number = id_number.strip()
    if not is_valid(id_number):
        raise ValueError("RSA ID not valid")

    return IDDetails(
        date_of_birth=_resolve_birth_date(id_number),
        gender=classify_gender(id_number),
        citizenship=_CITIZENSHIP_DIGITS[id_number[10]],
    )
