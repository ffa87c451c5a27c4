"""Error taxonomy — fatal construction/startup errors vs. recoverable reporting errors."""

from typing import Optional


class ProseCheckError(Exception):
    """Base class for every error raised by prosecheck."""


class BuilderStateError(ProseCheckError):
    """Document hierarchy ordering was violated while building the model.

    Raised immediately; the builder never tries to recover.
    """

    def __init__(self, operation: str, state: str, message: Optional[str] = None):
        self.operation = operation
        self.state = state
        super().__init__(message or f"Cannot {operation} while builder is in state '{state}'")


class ConfigurationError(ProseCheckError):
    """Invalid validator configuration detected at engine startup."""

    def __init__(self, message: str, validator: Optional[str] = None, key: Optional[str] = None):
        self.validator = validator
        self.key = key
        prefix = f"[{validator}] " if validator else ""
        super().__init__(f"{prefix}{message}")


class SinkError(ProseCheckError):
    """A finding could not be delivered to a reporting sink. Never fatal."""


class ValidatorRuntimeError(ProseCheckError):
    """A validator raised while checking a document and the fault policy is ABORT."""

    def __init__(self, validator: str, cause: BaseException):
        self.validator = validator
        self.cause = cause
        super().__init__(f"Validator '{validator}' failed: {cause}")
