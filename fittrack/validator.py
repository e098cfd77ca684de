# backend/fittrack/validator.py
import re
from typing import Any, Dict, List

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


class Validator:
    """
    Collects field errors for one validation pass.

    Every ``check`` takes a condition that is True when the field is INVALID,
    so presence and length rules read the same way:

        v.check(not first_name, "firstName", "is required")
        v.check(len(first_name) < 3, "firstName", "must be at least 3 characters")
    """

    def __init__(self):
        self._errors: List[Dict[str, str]] = []

    @property
    def valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> List[Dict[str, str]]:
        return list(self._errors)

    def check(self, violated: bool, field: str, message: str) -> None:
        if violated:
            self._errors.append({"field": field, "message": message})

    @staticmethod
    def matches(value: Any, rx: "re.Pattern[str]") -> bool:
        return isinstance(value, str) and rx.fullmatch(value) is not None

    @staticmethod
    def permitted(value: Any, *allowed: str) -> bool:
        return value in allowed
