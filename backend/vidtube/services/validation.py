"""Input validation helpers raising InvalidArgumentError."""

from vidtube.exceptions import InvalidArgumentError

# Primary keys are 32-bit signed INTEGER columns
MAX_ID = 2**31 - 1


def parse_id(value, label: str) -> int:
    """
    Parse a path/body identifier into a positive integer.

    Only ASCII decimal digits are accepted, and the value must fit the
    primary key column.

    Args:
        value: Raw identifier (int or string)
        label: Entity name for the error message, e.g. "video"

    Returns:
        The identifier as int
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {label} ID")
    if isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip() if value is not None else ""
        if not (text.isascii() and text.isdecimal()):
            raise InvalidArgumentError(f"Invalid {label} ID")
        try:
            parsed = int(text)
        except ValueError:
            raise InvalidArgumentError(f"Invalid {label} ID")
    if not 0 < parsed <= MAX_ID:
        raise InvalidArgumentError(f"Invalid {label} ID")
    return parsed


def require_text(value: str | None, message: str) -> str:
    """Return the trimmed value, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise InvalidArgumentError(message)
    return value.strip()


def optional_text(value: str | None) -> str | None:
    """Trimmed value, or None when missing or blank."""
    if value is None or not value.strip():
        return None
    return value.strip()
