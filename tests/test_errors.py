"""Tests for the error hierarchy."""

import pytest

from prosecheck.errors import (
    BuilderStateError,
    ConfigurationError,
    ProseCheckError,
    SinkError,
    ValidatorRuntimeError,
)


@pytest.mark.parametrize("error_type", [BuilderStateError, ConfigurationError, SinkError, ValidatorRuntimeError])
def test_all_errors_share_base(error_type):
    assert issubclass(error_type, ProseCheckError)


def test_configuration_error_context():
    error = ConfigurationError("Option 'max_len' must be an integer", validator="SentenceLength", key="max_len")
    assert str(error) == "[SentenceLength] Option 'max_len' must be an integer"
    assert error.key == "max_len"


def test_configuration_error_without_validator():
    assert str(ConfigurationError("No symbol table")) == "No symbol table"


def test_validator_runtime_error_keeps_cause():
    cause = ZeroDivisionError("division by zero")
    error = ValidatorRuntimeError("CommaNumber", cause)
    assert error.cause is cause
    assert "CommaNumber" in str(error)
