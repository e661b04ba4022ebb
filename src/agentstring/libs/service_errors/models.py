"""Pydantic models describing service error classifications and arguments."""

import re
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

# UpperCamel namespace and name separated by a colon, e.g. "Default:InvalidArgument".
_UPPER_CAMEL: Final[str] = r"[A-Z][a-z0-9]+(?:[A-Z][a-z0-9]+)*"
ERROR_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(rf"^{_UPPER_CAMEL}:{_UPPER_CAMEL}$")


class ErrorCode(str, Enum):
    """Machine-readable classification of a service error."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    REQUEST_ENTITY_TOO_LARGE = "REQUEST_ENTITY_TOO_LARGE"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    INTERNAL = "INTERNAL"
    TIMEOUT = "TIMEOUT"
    CUSTOM_CLIENT = "CUSTOM_CLIENT"
    CUSTOM_SERVER = "CUSTOM_SERVER"

    @property
    def http_status(self) -> int:
        """HTTP status code conventionally returned for this error code."""
        return _HTTP_STATUS[self]


_HTTP_STATUS: Final[dict[ErrorCode, int]] = {
    ErrorCode.PERMISSION_DENIED: 403,
    ErrorCode.INVALID_ARGUMENT: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.REQUEST_ENTITY_TOO_LARGE: 413,
    ErrorCode.FAILED_PRECONDITION: 500,
    ErrorCode.INTERNAL: 500,
    ErrorCode.TIMEOUT: 500,
    ErrorCode.CUSTOM_CLIENT: 400,
    ErrorCode.CUSTOM_SERVER: 500,
}


class ErrorType(BaseModel):
    """An error code paired with a namespaced error name."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the name has the form ``Namespace:Name`` in UpperCamel case."""
        if not ERROR_NAME_PATTERN.match(v):
            raise ValueError(f"Error name must match 'Namespace:Name' in UpperCamel case: {v!r}")
        return v


class Arg(BaseModel):
    """A named diagnostic attribute attached to a service error.

    Safe arguments may be written to logs; unsafe arguments only appear in the
    full exception message.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any
    safe: bool = False


def safe_arg(name: str, value: object) -> Arg:
    """Create an argument that is safe to log."""
    return Arg(name=name, value=value, safe=True)


def unsafe_arg(name: str, value: object) -> Arg:
    """Create an argument that must not be logged."""
    return Arg(name=name, value=value, safe=False)


class SerializableError(BaseModel):
    """Wire representation of an error returned by a remote service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error_code: str = Field(..., alias="errorCode")
    error_name: str = Field(..., alias="errorName")
    error_instance_id: str = Field(..., alias="errorInstanceId")
    parameters: dict[str, str] = Field(default_factory=dict)
