"""Validation Engine — runs every registered validator over a document collection.

This is the main entry point for checking documents. The engine runs three
ordered phases and returns the findings in a fixed order:

    1. document phase   — each document × document validators
    2. section phase    — each document × each section × section validators
    3. sentence phase   — pre-processing over the whole collection first,
                          then validation; per section the sentences are
                          visited as paragraphs → header → list elements

Usage:
    engine = ValidationEngine(configuration, sink=StreamSink(sys.stdout))
    findings = engine.check(collection)
"""

import threading
import time
from typing import Optional, Sequence

import structlog

from prosecheck.config import Configuration, get_settings
from prosecheck.errors import ConfigurationError, ValidatorRuntimeError
from prosecheck.models.document import Document, DocumentCollection, Sentence, Tokenizer
from prosecheck.models.validation import FaultPolicy, Finding
from prosecheck.services.sinks import FindingSink, NullSink
from prosecheck.symbols import SymbolTable
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.messages import MessageCatalog
from prosecheck.validators.registry import ValidatorRegistry, ValidatorSpec

logger = structlog.get_logger()

FAULT_VALIDATOR = "ValidatorFault"


class ValidationEngine:
    """Orchestrates the validators of one Configuration.

    Construction builds the validator registry; any configuration problem
    raises ConfigurationError here, before check() can be called. Results
    are not kept between runs, so check() can be called repeatedly; calls
    from several threads are serialized.
    """

    def __init__(
        self,
        configuration: Configuration,
        sink: Optional[FindingSink] = None,
        *,
        symbol_table: Optional[SymbolTable] = None,
        tokenizer: Optional[Tokenizer] = None,
        messages: Optional[MessageCatalog] = None,
        catalog: Optional[dict[str, ValidatorSpec]] = None,
        fault_policy: Optional[FaultPolicy] = None,
    ):
        self.configuration = configuration
        self.sink = sink if sink is not None else NullSink()
        self.fault_policy = FaultPolicy(fault_policy or get_settings().VALIDATOR_FAULT_POLICY)
        self.registry = ValidatorRegistry(
            configuration,
            symbol_table=symbol_table,
            tokenizer=tokenizer,
            messages=messages,
            catalog=catalog,
        )
        if f"{FAULT_VALIDATOR}.2" not in self.registry.messages:
            raise ConfigurationError(
                f"Missing message template '{FAULT_VALIDATOR}.2' for locale '{self.registry.messages.locale}'"
            )
        # Runs are serialized: pre-processors keep run-scoped counters.
        self._run_lock = threading.Lock()

    @property
    def lang(self) -> str:
        return self.registry.symbol_table.lang

    def check(self, collection: DocumentCollection) -> list[Finding]:
        """Validate the collection and return every finding in canonical order.

        Each finding is also forwarded to the sink; sink failures are logged
        and never remove a finding from the returned list.

        Raises:
            ValidatorRuntimeError: a validator raised and the fault policy is ABORT
        """
        with self._run_lock:
            return self._check(collection)

    def _check(self, collection: DocumentCollection) -> list[Finding]:
        start_time = time.perf_counter()
        findings: list[Finding] = []
        phase_timings: dict[str, float] = {}

        self._signal("on_header")
        try:
            phase_start = time.perf_counter()
            self._run_document_validators(collection, findings)
            phase_timings["document"] = _elapsed_ms(phase_start)

            phase_start = time.perf_counter()
            self._run_section_validators(collection, findings)
            phase_timings["section"] = _elapsed_ms(phase_start)

            phase_start = time.perf_counter()
            self._run_sentence_preprocessors(collection, findings)
            phase_timings["preprocess"] = _elapsed_ms(phase_start)

            phase_start = time.perf_counter()
            self._run_sentence_validators(collection, findings)
            phase_timings["sentence"] = _elapsed_ms(phase_start)
        finally:
            self._signal("on_footer")

        logger.info(
            "validation_complete",
            lang=self.lang,
            documents=len(collection),
            total_findings=len(findings),
            duration_ms=_elapsed_ms(start_time),
            phase_timings=phase_timings,
        )
        return findings

    # ── Phases ──

    def _run_document_validators(self, collection: DocumentCollection, findings: list[Finding]) -> None:
        for document in collection:
            for validator in self.registry.document_validators:
                self._emit(findings, document, self._validate(validator, document))

    def _run_section_validators(self, collection: DocumentCollection, findings: list[Finding]) -> None:
        for document in collection:
            for section in document:
                for validator in self.registry.section_validators:
                    self._emit(findings, document, self._validate(validator, section))

    def _run_sentence_preprocessors(self, collection: DocumentCollection, findings: list[Finding]) -> None:
        preprocessors = self.registry.sentence_preprocessors
        if not preprocessors:
            return
        for preprocessor in preprocessors:
            preprocessor.reset()
        for document in collection:
            for section in document:
                for sentences in section.iter_sentence_groups():
                    for preprocessor in preprocessors:
                        for sentence in sentences:
                            self._preprocess(preprocessor, sentence, document, findings)

    def _run_sentence_validators(self, collection: DocumentCollection, findings: list[Finding]) -> None:
        validators = self.registry.sentence_validators
        for document in collection:
            for section in document:
                for sentences in section.iter_sentence_groups():
                    for validator in validators:
                        for sentence in sentences:
                            self._emit(findings, document, self._validate(validator, sentence, sentence))

    # ── Validator invocation ──

    def _validate(self, validator: BaseValidator, block, sentence: Optional[Sentence] = None) -> list[Finding]:
        try:
            return validator.validate(block)
        except Exception as e:
            return [self._fault(validator, e, sentence)]

    def _preprocess(
        self,
        preprocessor: BaseValidator,
        sentence: Sentence,
        document: Document,
        findings: list[Finding],
    ) -> None:
        try:
            preprocessor.preprocess(sentence)
        except Exception as e:
            self._emit(findings, document, [self._fault(preprocessor, e, sentence)])

    def _fault(self, validator: BaseValidator, error: Exception, sentence: Optional[Sentence]) -> Finding:
        """Apply the fault policy to an exception raised by a validator."""
        if self.fault_policy is FaultPolicy.ABORT:
            raise ValidatorRuntimeError(validator.name, error) from error
        logger.error(
            "validator_failed",
            validator=validator.name,
            error=str(error),
            error_type=type(error).__name__,
        )
        return Finding(
            validator=FAULT_VALIDATOR,
            message=self.registry.messages.format(FAULT_VALIDATOR, validator.name, str(error)),
            sentence=sentence,
        )

    # ── Reporting ──

    def _emit(self, findings: list[Finding], document: Document, new_findings: Sequence[Finding]) -> None:
        for finding in new_findings:
            stamped = finding.with_file_name(document.file_name)
            findings.append(stamped)
            self._flush(stamped)

    def _flush(self, finding: Finding) -> None:
        """Forward a finding to the sink; a failure is logged and the finding skipped."""
        try:
            self.sink.on_finding(finding)
        except Exception as e:
            logger.error(
                "sink_flush_failed",
                validator=finding.validator,
                file_name=finding.file_name,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _signal(self, method: str) -> None:
        try:
            getattr(self.sink, method)()
        except Exception as e:
            logger.error("sink_signal_failed", signal=method, error=str(e), error_type=type(e).__name__)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
