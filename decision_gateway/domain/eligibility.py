"""Age gate - applicant age against a country-specific working-age cap"""

from datetime import date
from typing import Mapping
from decision_gateway.domain.models import Origin
from decision_gateway.domain.exceptions import NoValidLoanError
from decision_gateway.utils.date_utils import full_years_between

AGE_RESTRICTION_MESSAGE = "Loan was not given due to age restriction!"


def calculate_age(birth_date: date, today: date) -> int:
    """Full years elapsed since birth_date as of today"""
    return full_years_between(birth_date, today)


def expected_lifetime(origin: Origin, life_expectancies: Mapping[Origin, int], margin: int) -> int:
    """
    Oldest age at which a loan can still be given for the origin.

    Raises:
        ValueError: origin has no configured life expectancy (Origin.UNKNOWN)
    """
    if origin not in life_expectancies:
        raise ValueError(f"No life expectancy configured for origin {origin.value}")
    return life_expectancies[origin] - margin


def check_age_eligibility(age: int, minimum_age: int, max_age: int) -> None:
    """Raise NoValidLoanError unless minimum_age <= age <= max_age"""
    if age < minimum_age or age > max_age:
        raise NoValidLoanError(AGE_RESTRICTION_MESSAGE)
