"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Request input rejected before any decision logic runs"""

    pass


class InvalidPersonalCodeError(InvalidInputError):
    """Personal code failed the checksum validator"""

    pass


class InvalidLoanAmountError(InvalidInputError):
    """Requested amount is outside the configured bounds"""

    pass


class InvalidLoanPeriodError(InvalidInputError):
    """Requested period is outside the configured bounds"""

    pass


class MalformedPersonalCodeError(DomainException):
    """Personal code cannot be parsed into a birth date and sub-segment"""

    pass


class NoValidLoanError(DomainException):
    """Applicant is ineligible or no period within bounds yields a loan"""

    pass
