"""Service error types with structured codes, arguments and instance ids."""

from agentstring.libs.service_errors.exceptions import (
    RemoteError,
    ServiceError,
    generate_error_instance_id,
)
from agentstring.libs.service_errors.models import (
    Arg,
    ErrorCode,
    ErrorType,
    SerializableError,
    safe_arg,
    unsafe_arg,
)

__all__ = [
    "Arg",
    "ErrorCode",
    "ErrorType",
    "RemoteError",
    "SerializableError",
    "ServiceError",
    "generate_error_instance_id",
    "safe_arg",
    "unsafe_arg",
]
