"""Unit tests for the age gate"""

import pytest
from datetime import date
from decision_gateway.domain.eligibility import (
    AGE_RESTRICTION_MESSAGE,
    calculate_age,
    check_age_eligibility,
    expected_lifetime,
)
from decision_gateway.domain.models import Origin
from decision_gateway.domain.exceptions import NoValidLoanError
from decision_gateway.utils.date_utils import full_years_between

LIFE_EXPECTANCIES = {Origin.ESTONIA: 80, Origin.LATVIA: 85, Origin.LITHUANIA: 90}


def test_calculate_age_around_birthday():
    """Test a year is only counted once the birthday is reached"""
    birth = date(2001, 10, 19)

    assert calculate_age(birth, date(2026, 10, 18)) == 24
    assert calculate_age(birth, date(2026, 10, 19)) == 25
    assert calculate_age(birth, date(2026, 10, 20)) == 25


def test_calculate_age_leap_day_birth():
    """Test 29 February birthdays count on 1 March in common years"""
    birth = date(2004, 2, 29)

    assert calculate_age(birth, date(2022, 2, 28)) == 17
    assert calculate_age(birth, date(2022, 3, 1)) == 18
    assert calculate_age(birth, date(2024, 2, 29)) == 20


def test_full_years_between_same_day():
    assert full_years_between(date(2020, 5, 5), date(2020, 5, 5)) == 0


@pytest.mark.parametrize(
    "origin, expected",
    [(Origin.ESTONIA, 75), (Origin.LATVIA, 80), (Origin.LITHUANIA, 85)],
)
def test_expected_lifetime_per_origin(origin, expected):
    """Test base life expectancy minus the safety margin"""
    assert expected_lifetime(origin, LIFE_EXPECTANCIES, 5) == expected


def test_expected_lifetime_unknown_origin():
    """Test UNKNOWN origin has no default"""
    with pytest.raises(ValueError):
        expected_lifetime(Origin.UNKNOWN, LIFE_EXPECTANCIES, 5)


def test_check_age_eligibility_bounds():
    """Test minimum age and expected lifetime are both inclusive"""
    check_age_eligibility(18, minimum_age=18, max_age=75)
    check_age_eligibility(75, minimum_age=18, max_age=75)

    with pytest.raises(NoValidLoanError, match=AGE_RESTRICTION_MESSAGE):
        check_age_eligibility(17, minimum_age=18, max_age=75)

    with pytest.raises(NoValidLoanError, match=AGE_RESTRICTION_MESSAGE):
        check_age_eligibility(76, minimum_age=18, max_age=75)
