"""Credit scoring - risk segment classification and loan amount search"""

from decision_gateway.domain.models import LoanOffer
from decision_gateway.domain.exceptions import NoValidLoanError

NO_VALID_LOAN_MESSAGE = "No valid loan found!"


def determine_credit_modifier(sub_segment: int, segment_modifiers: tuple[int, int, int]) -> int:
    """
    Map the personal code sub-segment to a credit modifier.

    Segments:
    - 0000 - 2499: debt, no offer (0)
    - 2500 - 4999: segment 1
    - 5000 - 7499: segment 2
    - 7500 - 9999: segment 3
    """
    segment_1, segment_2, segment_3 = segment_modifiers

    if sub_segment < 2500:
        return 0
    elif sub_segment < 5000:
        return segment_1
    elif sub_segment < 7500:
        return segment_2
    else:
        return segment_3


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount approvable at loan_period for this credit modifier"""
    return credit_modifier * loan_period


def find_loan_offer(
    credit_modifier: int,
    loan_period: int,
    minimum_loan_amount: int,
    maximum_loan_amount: int,
    maximum_loan_period: int,
) -> LoanOffer:
    """
    Find the approvable amount, extending the period if needed.

    The period is only ever increased: starting from the requested period,
    step up one month at a time until the score reaches the minimum loan
    amount. The amount is capped at the maximum loan amount.

    Raises:
        ValueError: credit_modifier is not positive
        NoValidLoanError: no period up to maximum_loan_period reaches the minimum
    """
    if credit_modifier <= 0:
        raise ValueError("credit_modifier must be positive")

    period = loan_period
    while highest_valid_loan_amount(credit_modifier, period) < minimum_loan_amount:
        period += 1

    if period > maximum_loan_period:
        raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

    amount = min(maximum_loan_amount, highest_valid_loan_amount(credit_modifier, period))
    return LoanOffer(amount=amount, period=period)
