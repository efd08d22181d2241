"""Checksum validation of Estonian personal codes (isikukood)"""

from stdnum.ee import ik


class PersonalCodeValidator:
    """Structural and checksum validator backed by python-stdnum"""

    def is_valid(self, personal_code: str) -> bool:
        if not isinstance(personal_code, str):
            return False
        # ik.is_valid() strips separators first; only the bare 11 digits are accepted
        if personal_code != ik.compact(personal_code):
            return False
        return ik.is_valid(personal_code)
