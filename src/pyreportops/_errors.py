"""Exception hierarchy for report filter operators."""


class OperatorError(Exception):
    """Base exception for report filter operator errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class OperatorNotFoundError(OperatorError, LookupError):
    """Raised when an operator name is not registered."""


class ValidationError(OperatorError, ValueError):
    """Raised when a declared validator rejects a non-blank value."""


class InvalidDateError(ValidationError):
    """Raised when a date value cannot be parsed."""


class InvalidNumberError(ValidationError):
    """Raised when a numeric value cannot be parsed."""


class UnknownValidatorError(OperatorError):
    """Raised when an operator declares a validator that does not exist."""


# Sanitized user-facing error message constants
ERR_MSG_OPERATOR_NOT_FOUND = "operator not defined"
ERR_MSG_INVALID_DATE = "invalid date value"
ERR_MSG_INVALID_NUMBER = "invalid numeric value"
ERR_MSG_UNKNOWN_VALIDATOR = "unknown validator"
