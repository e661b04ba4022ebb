"""Exceptions carrying a service error type, arguments and an instance id."""

import uuid
from typing import Final

from agentstring.libs.service_errors.models import Arg, ErrorType, SerializableError

EXCEPTION_NAME: Final[str] = "ServiceError"


def render_no_args_message(exception_name: str, error_type: ErrorType) -> str:
    """Render the exception name and error type, without arguments."""
    return f"{exception_name}: {error_type.code.value} ({error_type.name})"


def render_unsafe_message(
    exception_name: str, error_type: ErrorType, args: tuple[Arg, ...]
) -> str:
    """Render the exception name, error type and every argument regardless of safety."""
    message = render_no_args_message(exception_name, error_type)
    if not args:
        return message
    rendered = ", ".join(f"{arg.name}={arg.value}" for arg in args)
    return f"{message}: {{{rendered}}}"


def generate_error_instance_id(cause: BaseException | None) -> str:
    """Return the error instance id of the nearest service error in a cause chain.

    Walks ``__cause__`` links starting at *cause*. The first
    :class:`ServiceError` or :class:`RemoteError` found supplies its id. If the
    chain ends, or loops back on itself, a new random id is generated.
    """
    seen: set[int] = set()
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        if isinstance(cause, ServiceError):
            return cause.error_instance_id
        if isinstance(cause, RemoteError):
            return cause.error.error_instance_id
        cause = cause.__cause__
    return str(uuid.uuid4())


class ServiceError(Exception):
    """An exception raised by a service to indicate an expected error state.

    ``str(error)`` includes every argument so that loggers without safe-logging
    support still record them; :attr:`log_message` omits them.
    """

    def __init__(
        self, error_type: ErrorType, *args: Arg | None, cause: BaseException | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            error_type: Classification of the error.
            *args: Diagnostic arguments. ``None`` entries are dropped.
            cause: Optional underlying exception, also set as ``__cause__``.
        """
        self.error_type = error_type
        self.arguments: tuple[Arg, ...] = tuple(arg for arg in args if arg is not None)
        self.error_instance_id = generate_error_instance_id(cause)
        self.log_message = render_no_args_message(EXCEPTION_NAME, error_type)
        self.message = render_unsafe_message(EXCEPTION_NAME, error_type, self.arguments)
        super().__init__(self.message)
        self.__cause__ = cause

    @property
    def safe_args(self) -> tuple[Arg, ...]:
        """Arguments that may be written to logs."""
        return tuple(arg for arg in self.arguments if arg.safe)

    def __str__(self) -> str:
        """Return the message including all arguments."""
        return self.message


class RemoteError(Exception):
    """An error returned by a remote service in serialized form."""

    def __init__(self, error: SerializableError, status: int) -> None:
        """Initialize the exception.

        Args:
            error: The deserialized error body.
            status: HTTP status of the response.
        """
        self.error = error
        self.status = status
        super().__init__(
            f"RemoteError: {error.error_code} ({error.error_name}) with instance ID "
            f"{error.error_instance_id}"
        )
