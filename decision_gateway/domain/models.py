"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Origin(Enum):
    """Applicant origin inferred from the personal code sub-segment"""

    ESTONIA = "estonia"
    LATVIA = "latvia"
    LITHUANIA = "lithuania"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedPersonalCode:
    """Fields extracted from an 11-digit personal code"""

    century_indicator: int
    birth_date: date
    sub_segment: int  # last four digits, 0..9999


@dataclass(frozen=True)
class LoanOffer:
    """Largest approvable amount and the period it was found at"""

    amount: int
    period: int


@dataclass(frozen=True)
class Decision:
    """Output of a loan evaluation: approved terms or an error message"""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str] = None

    @classmethod
    def approved(cls, amount: int, period: int) -> "Decision":
        return cls(loan_amount=amount, loan_period=period, error_message=None)

    @classmethod
    def rejected(cls, message: str) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error_message=message)
