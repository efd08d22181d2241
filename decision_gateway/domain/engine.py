"""Loan decision engine - core business logic for loan decisions"""

from datetime import date
from typing import Callable, Protocol
from decision_gateway.config import Settings, settings as default_settings
from decision_gateway.domain.models import Decision, Origin
from decision_gateway.domain.exceptions import (
    InvalidInputError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.identifier import determine_origin, parse_personal_code
from decision_gateway.domain.eligibility import calculate_age, check_age_eligibility, expected_lifetime
from decision_gateway.domain.scoring import NO_VALID_LOAN_MESSAGE, determine_credit_modifier, find_loan_offer


class CodeValidator(Protocol):
    def is_valid(self, personal_code: str) -> bool: ...


class DecisionEngine:
    """
    Calculates the approved loan amount and period for an applicant.

    The instance holds only the validator, the clock and the frozen settings;
    every value derived during an evaluation is local to that call, so one engine
    can serve concurrent requests.
    """

    def __init__(
        self,
        validator: CodeValidator,
        config: Settings | None = None,
        clock: Callable[[], date] = date.today,
    ):
        self.validator = validator
        self.config = config or default_settings
        self.clock = clock

    def evaluate(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
        today: date | None = None,
    ) -> Decision:
        """
        Main entry point: validate inputs and find the best loan for the applicant.

        Flow:
        1. Verify personal code checksum, amount bounds and period bounds
        2. Parse birth date and sub-segment from the personal code
        3. Age gate against the origin's expected lifetime
        4. Map sub-segment to a credit modifier
        5. Search for the approvable amount, extending the period if needed

        Invalid input (step 1) is returned as a Decision carrying only an
        error message. Failures in steps 2-5 are raised.

        Raises:
            MalformedPersonalCodeError: code passed the validator but cannot be parsed
            NoValidLoanError: age restriction, debt segment or no period within bounds
        """
        try:
            self.verify_inputs(personal_code, loan_amount, loan_period)
        except InvalidInputError as e:
            return Decision.rejected(str(e))

        today = today or self.clock()
        parsed = parse_personal_code(personal_code)

        origin = determine_origin(parsed.sub_segment)
        max_age = expected_lifetime(
            origin,
            self._life_expectancies(),
            self.config.life_expectancy_margin,
        )
        age = calculate_age(parsed.birth_date, today)
        check_age_eligibility(age, self.config.minimum_age, max_age)

        credit_modifier = determine_credit_modifier(parsed.sub_segment, self.config.segment_modifiers)
        if credit_modifier == 0:
            raise NoValidLoanError(NO_VALID_LOAN_MESSAGE)

        offer = find_loan_offer(
            credit_modifier,
            loan_period,
            minimum_loan_amount=self.config.minimum_loan_amount,
            maximum_loan_amount=self.config.maximum_loan_amount,
            maximum_loan_period=self.config.maximum_loan_period,
        )
        return Decision.approved(offer.amount, offer.period)

    def verify_inputs(self, personal_code: str, loan_amount: int, loan_period: int) -> None:
        """
        Check request inputs against business bounds.

        Raises:
            InvalidPersonalCodeError: checksum validator rejected the code
            InvalidLoanAmountError: amount outside [minimum, maximum]
            InvalidLoanPeriodError: period outside [minimum, maximum]
        """
        if not self.validator.is_valid(personal_code):
            raise InvalidPersonalCodeError("Invalid personal ID code!")
        if not self.config.minimum_loan_amount <= loan_amount <= self.config.maximum_loan_amount:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not self.config.minimum_loan_period <= loan_period <= self.config.maximum_loan_period:
            raise InvalidLoanPeriodError("Invalid loan period!")

    def _life_expectancies(self) -> dict[Origin, int]:
        return {
            Origin.ESTONIA: self.config.estonia_life_expectancy,
            Origin.LATVIA: self.config.latvia_life_expectancy,
            Origin.LITHUANIA: self.config.lithuania_life_expectancy,
        }
