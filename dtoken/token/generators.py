"""Replaceable generators for persistent and transient identifiers."""

from __future__ import annotations

import logging
import threading
from functools import partial

from ..config import TokenConfig
from ..errors import InvalidGeneratorError
from ..utils.ids import random_string_generator
from .grammar import is_identifier
from .types import StringGenerator

logger = logging.getLogger(__name__)


def _check_generator(fn: StringGenerator) -> None:
    result = fn()
    if not is_identifier(result):
        logger.warning("Rejected identifier generator %r: first call returned %s", fn, type(result).__name__)
        raise InvalidGeneratorError(result)


class GeneratorSlots:
    """Holds the active persistent and transient generators behind a lock.

    A replacement is invoked once before it is installed. If that call does not
    return a non-empty string free of ``_`` and ``:``, InvalidGeneratorError is
    raised and the previous generator stays active.
    """

    def __init__(
        self,
        config: TokenConfig | None = None,
        *,
        persistent: StringGenerator | None = None,
        transient: StringGenerator | None = None,
    ) -> None:
        self.config = config or TokenConfig()
        self._lock = threading.Lock()
        self._persistent: StringGenerator = partial(random_string_generator, self.config.persistent_length)
        self._transient: StringGenerator = partial(random_string_generator, self.config.transient_length)
        if persistent is not None:
            self.set_persistent(persistent)
        if transient is not None:
            self.set_transient(transient)

    def set_persistent(self, fn: StringGenerator) -> None:
        _check_generator(fn)
        with self._lock:
            self._persistent = fn
        logger.debug("Persistent identifier generator replaced with %r", fn)

    def set_transient(self, fn: StringGenerator) -> None:
        _check_generator(fn)
        with self._lock:
            self._transient = fn
        logger.debug("Transient identifier generator replaced with %r", fn)

    def persistent(self) -> str:
        with self._lock:
            fn = self._persistent
        return fn()

    def transient(self) -> str:
        with self._lock:
            fn = self._transient
        return fn()
