"""Validators — rule checks and the engine that runs them.

Usage:
    from prosecheck.validators import ValidationEngine

    engine = ValidationEngine(configuration)
    findings = engine.check(collection)

Validators are defined in submodules and register themselves with
``register_validator`` when imported below.
"""

from prosecheck.models.validation import FaultPolicy, Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import (
    VALIDATOR_CATALOG,
    RegisteredValidator,
    ValidatorRegistry,
    ValidatorSpec,
    register_validator,
)

# Import submodules to trigger validator registration.
from prosecheck.validators import (  # noqa: F401
    comma_number_validator,
    contraction_validator,
    gapped_section_validator,
    invalid_expression_validator,
    invalid_symbol_validator,
    invalid_word_validator,
    paragraph_number_validator,
    paragraph_start_with_validator,
    section_count_validator,
    section_length_validator,
    sentence_length_validator,
    space_beginning_of_sentence_validator,
    suggest_expression_validator,
    symbol_with_space_validator,
    word_number_validator,
)
from prosecheck.validators.engine import ValidationEngine

__all__ = [
    "BaseValidator",
    "FaultPolicy",
    "Finding",
    "Granularity",
    "VALIDATOR_CATALOG",
    "RegisteredValidator",
    "ValidatorRegistry",
    "ValidatorSpec",
    "register_validator",
    "ValidationEngine",
]
