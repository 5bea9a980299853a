"""Questions sent by visitors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from .validation import validate_length

EMAIL_SIZE = 100
DATE_SIZE = 20
SUBJECT_SIZE = 200
DESCRIPTION_SIZE = 300

_TEXT_LIMITS = {
    "email": EMAIL_SIZE,
    "date": DATE_SIZE,
    "subject": SUBJECT_SIZE,
    "description": DESCRIPTION_SIZE,
}


@dataclass
class Question:
    """A question with its sender and the day it was asked.

    Fields are cut to their column sizes; after creation a missing value
    leaves a field as it was.
    """

    email: str = ""
    date: str = ""
    subject: str = ""
    description: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _TEXT_LIMITS:
            if value is None:
                if name in self.__dict__:
                    return
                value = ""
            value = str(value)[: _TEXT_LIMITS[name]]
        object.__setattr__(self, name, value)


def make_question(
    email: str | None,
    subject: str | None,
    description: str | None,
    today: date | None = None,
) -> Question:
    """Create a question dated ``today``.

    Raises ValueError when a field is missing or too long.
    """
    asked = (today or date.today()).strftime("%Y-%m-%d")
    checks = (
        ("email", email, EMAIL_SIZE),
        ("date", asked, DATE_SIZE),
        ("subject", subject, SUBJECT_SIZE),
        ("description", description, DESCRIPTION_SIZE),
    )
    for label, value, limit in checks:
        if not validate_length(value, limit):
            raise ValueError(f"question {label} is missing or longer than {limit}")
    return Question(email, asked, subject, description)