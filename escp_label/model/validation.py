"""
validation.py: argument checks shared by the option records and encoders.

Every check raises InvalidArgumentError before any byte is produced, so a
failed call never yields a partial command.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar

__all__ = [
    "InvalidArgumentError",
    "coerce_enum",
    "require_text",
    "require_int_range",
    "require_optional_byte",
    "lookup_code",
]

E = TypeVar("E", bound=Enum)

BYTE_MIN = 0
BYTE_MAX = 255


class InvalidArgumentError(ValueError):
    """Empty required text, out-of-range number or unknown enum value."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def _normalize(token: str) -> str:
    return token.replace("-", "").replace("_", "").replace(" ", "").upper()


def coerce_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """
    Resolve value to a member of enum_cls.

    Accepts a member, its value or its name. Strings are compared
    case-insensitively with dashes, underscores and spaces ignored, so
    "GS1-128", "gs1_128" and "Gs1128" all resolve to the same member.
    """
    if isinstance(value, enum_cls):
        return value
    # str-valued members of another enum must not match by value
    if isinstance(value, str) and not isinstance(value, Enum):
        wanted = _normalize(value)
        for member in enum_cls:
            if wanted in (_normalize(member.name), _normalize(str(member.value))):
                return member
    allowed = ", ".join(member.name for member in enum_cls)
    raise InvalidArgumentError(
        f"{field}: unrecognized {enum_cls.__name__} value {value!r} (allowed: {allowed})",
        field=field,
    )


def require_text(value: Any, field: str) -> str:
    if value is None or not isinstance(value, str) or value == "":
        raise InvalidArgumentError(f"{field}: text cannot be null or empty", field=field)
    return value


def require_int_range(value: Any, low: int, high: int, field: str) -> int:
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{field}: expected an integer, got {type(value).__name__}", field=field
        )
    if not (low <= value <= high):
        raise InvalidArgumentError(f"{field} must be {low}-{high}, got {value}", field=field)
    return value


def require_optional_byte(value: Any, field: str) -> Optional[int]:
    if value is None:
        return None
    return require_int_range(value, BYTE_MIN, BYTE_MAX, field)


def lookup_code(table: Mapping[E, bytes], member: Any, field: str) -> bytes:
    """Return the wire parameter for member, coercing it first."""
    enum_cls = type(next(iter(table)))
    resolved = coerce_enum(enum_cls, member, field)
    try:
        return table[resolved]
    except KeyError:
        raise InvalidArgumentError(
            f"{field}: no command code for {resolved.name}", field=field
        ) from None
