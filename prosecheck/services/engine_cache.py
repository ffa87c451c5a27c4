"""Engine cache — builds at most one ValidationEngine per key.

Building an engine means loading every validator of a configuration, so the
HTTP layer keeps one engine per language. Concurrent first requests for the
same key wait for a single construction instead of racing to build several.
"""

import threading
from typing import Callable, Optional

import structlog

from prosecheck.config import default_configuration
from prosecheck.validators.engine import ValidationEngine

logger = structlog.get_logger()

EngineFactory = Callable[[str], ValidationEngine]


class EngineCache:
    """Thread-safe compute-if-absent map of key → ValidationEngine.

    A failed construction is not cached; the next caller retries it.
    """

    def __init__(self, factory: EngineFactory):
        self._factory = factory
        self._engines: dict[str, ValidationEngine] = {}
        self._key_locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()
        # Bumped by clear(); a build started before a clear is not stored.
        self._generation = 0

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def get_or_create(self, key: str) -> ValidationEngine:
        engine = self._engines.get(key)
        if engine is not None:
            return engine

        with self._lock_for(key):
            with self._guard:
                engine = self._engines.get(key)
                generation = self._generation
            if engine is None:
                logger.info("engine_building", key=key)
                engine = self._factory(key)
                with self._guard:
                    if generation == self._generation:
                        self._engines[key] = engine
                    else:
                        logger.info("engine_discarded", key=key)
        return engine

    def get(self, key: str) -> Optional[ValidationEngine]:
        return self._engines.get(key)

    def keys(self) -> list[str]:
        return list(self._engines)

    def clear(self) -> None:
        with self._guard:
            self._generation += 1
            self._engines.clear()
            self._key_locks.clear()


def _default_engine(lang: str) -> ValidationEngine:
    return ValidationEngine(default_configuration(lang))


# Module-level singleton
engine_cache = EngineCache(_default_engine)
