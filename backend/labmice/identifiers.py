import re
from typing import Any
from uuid import UUID

from .errors import InvalidIdentifier

# canonical uuid4 text form, as produced by str(uuid.uuid4())
_ID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def is_valid_id(value: Any) -> bool:
    """Return True when ``value`` is an identifier the database could have issued."""

    if isinstance(value, UUID):
        return True
    if not isinstance(value, str):
        return False
    return bool(_ID_PATTERN.fullmatch(value))


def parse_id(value: Any) -> UUID:
    if not is_valid_id(value):
        raise InvalidIdentifier()
    if isinstance(value, UUID):
        return value
    return UUID(value)


def parse_optional_id(value: Any) -> UUID | None:
    """Parse a reference that may be left unset; falsy values mean unset."""

    if not value:
        return None
    return parse_id(value)
