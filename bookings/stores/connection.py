"""Process-wide connection cache.

One acquisition may be in flight at a time. Callers arriving while it is
pending wait on the same future instead of connecting again. A failed
acquisition clears the pending marker so the next caller retries.
"""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from enum import Enum
from typing import Any

from bookings.domain.errors import StoreConnectionError

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ConnectionCache:
    """Caches the handle returned by ``connect`` for the life of the process."""

    def __init__(self, connect: Callable[[], Any]) -> None:
        self._connect = connect
        self._lock = threading.Lock()
        self._state = ConnectionState.UNINITIALIZED
        self._connection: Any = None
        self._pending: Future | None = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    def get_connection(self) -> Any:
        """Return the cached handle, connecting if nothing is cached yet.

        Raises:
            StoreConnectionError: If the acquisition this call waited on failed.
        """
        with self._lock:
            if self._state is ConnectionState.CONNECTED:
                return self._connection
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()
                self._state = ConnectionState.CONNECTING

        if not owner:
            return pending.result()

        logger.info("Acquiring store connection")
        try:
            connection = self._connect()
        except BaseException as exc:
            with self._lock:
                self._pending = None
                self._state = ConnectionState.UNINITIALIZED
            if not isinstance(exc, Exception):
                pending.set_exception(StoreConnectionError("Connection attempt was interrupted"))
                raise
            error = exc if isinstance(exc, StoreConnectionError) else StoreConnectionError(str(exc))
            logger.error("Store connection failed: %s", error.message)
            pending.set_exception(error)
            if error is exc:
                raise
            raise error from exc

        with self._lock:
            self._connection = connection
            self._pending = None
            self._state = ConnectionState.CONNECTED
        pending.set_result(connection)
        return connection

    def reset(self) -> None:
        """Forget the cached handle. Used by tests."""
        with self._lock:
            self._connection = None
            self._pending = None
            self._state = ConnectionState.UNINITIALIZED


_default_cache: ConnectionCache | None = None
_default_lock = threading.Lock()


def get_connection_cache() -> ConnectionCache:
    """Return the process-wide cache for the Django database."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            from bookings.stores.django_store import open_database

            _default_cache = ConnectionCache(open_database)
        return _default_cache


def reset_connection_cache() -> None:
    global _default_cache
    with _default_lock:
        _default_cache = None
