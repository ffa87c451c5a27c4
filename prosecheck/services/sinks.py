"""Finding sinks — best-effort reporting of findings as a run produces them.

The engine's returned list is the authoritative result. A sink only mirrors
it somewhere else (a stream, in-process listeners), and a sink failure is
never allowed to change that list.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

import structlog

from prosecheck.errors import SinkError
from prosecheck.models.validation import Finding

logger = structlog.get_logger()

# Type alias for finding listeners
FindingListener = Callable[[Finding], None]


class FindingSink(ABC):
    """Receives the header signal, each finding in result order, then the footer signal."""

    def on_header(self) -> None:
        """Called once before the first finding of a run."""

    @abstractmethod
    def on_finding(self, finding: Finding) -> None:
        """Deliver one finding.

        Raises:
            SinkError: the finding could not be delivered
        """
        ...

    def on_footer(self) -> None:
        """Called once after the last finding of a run."""


class NullSink(FindingSink):
    """Discards everything. For embedded use and tests."""

    def on_finding(self, finding: Finding) -> None:
        pass


class StreamSink(FindingSink):
    """Writes one JSON object per finding to a text stream."""

    def __init__(self, stream: Optional[TextIO]):
        if stream is None:
            raise ValueError("StreamSink requires an output stream")
        self._stream = stream

    def on_finding(self, finding: Finding) -> None:
        if finding is None:
            raise SinkError("Cannot write a null finding")
        line = finding.model_dump_json()
        try:
            self._stream.write(line + "\n")
        except (OSError, ValueError) as e:
            raise SinkError(f"Failed to write finding: {e}") from e

    def on_footer(self) -> None:
        try:
            self._stream.flush()
        except (OSError, ValueError) as e:
            logger.warning("stream_sink_flush_failed", error=str(e))


class CollectingSink(FindingSink):
    """In-memory sink with pub/sub listeners.

    Keeps the findings of the current run and forwards each one to the
    subscribed listeners. A listener that raises is logged and dropped;
    the remaining listeners still receive the finding.
    """

    def __init__(self) -> None:
        self.findings: list[Finding] = []
        self.runs = 0
        self._listeners: list[FindingListener] = []

    def subscribe(self, listener: FindingListener) -> None:
        self._listeners.append(listener)
        logger.debug("sink_subscribe", total_listeners=len(self._listeners))

    def unsubscribe(self, listener: FindingListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_header(self) -> None:
        self.findings = []

    def on_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

        dead_listeners = []
        for listener in self._listeners:
            try:
                listener(finding)
            except Exception as e:
                logger.warning("finding_listener_failed", validator=finding.validator, error=str(e))
                dead_listeners.append(listener)

        for dead in dead_listeners:
            self._listeners.remove(dead)

    def on_footer(self) -> None:
        self.runs += 1
