"""Email address validation and canonicalization.

The whole address, local part included, is lowercased. Mail providers
mostly treat the local part case-insensitively, so two bookings that differ
only in case count as the same person.
"""

import re

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from bookings.domain.errors import InvalidEmailError

MAX_EMAIL_LENGTH = 254

# validate_email accepts quoted local parts; those may hold spaces and brackets.
_FORBIDDEN = re.compile(r"[\s<>]")


def validate_and_normalize(value: str) -> str:
    """Return the trimmed, lowercased address.

    Raises:
        InvalidEmailError: If the address is not a plausible email.
    """
    if not isinstance(value, str):
        raise InvalidEmailError()

    email = value.strip()
    if len(email) > MAX_EMAIL_LENGTH or _FORBIDDEN.search(email):
        raise InvalidEmailError()
    # validate_email allows dotless "localhost".
    if "." not in email.rpartition("@")[2]:
        raise InvalidEmailError()
    try:
        validate_email(email)
    except ValidationError as exc:
        raise InvalidEmailError() from exc
    return email.lower()
