"""Personal code parsing - birth date and sub-segment extraction"""

from datetime import date
from decision_gateway.domain.models import Origin, ParsedPersonalCode
from decision_gateway.domain.exceptions import MalformedPersonalCodeError

PERSONAL_CODE_LENGTH = 11

# Century indicator -> first year of the century
CENTURY_BY_INDICATOR = {
    1: 1800,
    2: 1800,
    3: 1900,
    4: 1900,
    5: 2000,
    6: 2000,
}


def extract_sub_segment(personal_code: str) -> int:
    """Last four digits of the code as an integer (0..9999)"""
    return int(personal_code[-4:])


def parse_personal_code(personal_code: str) -> ParsedPersonalCode:
    """
    Parse an 11-digit personal code.

    Layout: C YY MM DD SSSS
    - C: century indicator (1-2 -> 1800s, 3-4 -> 1900s, 5-6 -> 2000s)
    - YY MM DD: birth date
    - SSSS: sub-segment used for origin and credit segment

    Raises:
        MalformedPersonalCodeError: wrong length, non-digits, unknown century
            indicator or impossible birth date
    """
    if personal_code is None or len(personal_code) != PERSONAL_CODE_LENGTH:
        raise MalformedPersonalCodeError("Personal code must be exactly 11 digits")

    # str.isdigit() accepts non-ASCII digits such as '²'
    if not (personal_code.isascii() and personal_code.isdigit()):
        raise MalformedPersonalCodeError("Personal code must contain only digits")

    century_indicator = int(personal_code[0])
    century = CENTURY_BY_INDICATOR.get(century_indicator)
    if century is None:
        raise MalformedPersonalCodeError("Invalid century indicator in personal code")

    year = century + int(personal_code[1:3])
    month = int(personal_code[3:5])
    day = int(personal_code[5:7])

    try:
        birth_date = date(year, month, day)
    except ValueError as e:
        raise MalformedPersonalCodeError(f"Invalid birth date in personal code: {e}") from e

    return ParsedPersonalCode(
        century_indicator=century_indicator,
        birth_date=birth_date,
        sub_segment=extract_sub_segment(personal_code),
    )


def determine_origin(sub_segment: int) -> Origin:
    """
    Map the sub-segment to the applicant's origin.

    Ranges:
    - 0 - 3000:    Estonia
    - 3001 - 6000: Latvia
    - 6001 - 9999: Lithuania
    """
    if 0 <= sub_segment <= 3000:
        return Origin.ESTONIA
    elif 3001 <= sub_segment <= 6000:
        return Origin.LATVIA
    elif 6001 <= sub_segment <= 9999:
        return Origin.LITHUANIA
    return Origin.UNKNOWN
