import re
from datetime import datetime
from typing import Optional


EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def is_valid_email(email: Optional[str]) -> bool:
    if email is None:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def format_date(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def capitalize_first_letter(value: Optional[str]) -> Optional[str]:
    """Upper-case the first character and lower-case the rest."""
    if not value:
        return value
    return value[:1].upper() + value[1:].lower()


def value_or_default(value: Optional[str], default: Optional[str]) -> Optional[str]:
    if not value:
        return default
    return value
