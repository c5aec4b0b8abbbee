r"""Cooperative cancellation for waits and retry sequences.

A ``CancellationToken`` is created by the caller and passed to
``retry``/``retry_async`` (and from there to the cancellable waits).
Cancelling it aborts any pending wait immediately; an operation that is
already running is not interrupted.
"""

from __future__ import annotations

__all__ = ["CancellationToken"]

import logging
import threading
from typing import TYPE_CHECKING, Any

from aretry.exceptions import OperationCancelledError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe cancellation handle.

    The token starts in the non-cancelled state and can be cancelled
    exactly once. Listeners registered with ``add_listener`` are one-shot:
    they are called with the token when it is cancelled, then dropped.

    Example:
        ```pycon
        >>> from aretry import CancellationToken
        >>> token = CancellationToken()
        >>> token.cancelled
        False
        >>> token.cancel("shutting down")
        >>> token.cancelled
        True
        >>> token.reason
        'shutting down'

        ```
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cancelled = False
        self._reason: Any = None
        self._listeners: list[Callable[[CancellationToken], None]] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self._cancelled})"

    @property
    def cancelled(self) -> bool:
        """``True`` once ``cancel`` has been called."""
        return self._cancelled

    @property
    def reason(self) -> Any:
        """The cancellation reason, or ``None`` while not cancelled."""
        return self._reason

    def cancel(self, reason: Any = None) -> None:
        """Cancel the token and notify the registered listeners.

        Calling ``cancel`` on an already cancelled token does nothing. A
        listener that raises is logged and does not prevent the other
        listeners from being notified.

        Args:
            reason: The cancellation reason. Any value is accepted; when
                it is ``None`` a new ``OperationCancelledError`` is used.
        """
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = OperationCancelledError() if reason is None else reason
            listeners, self._listeners = self._listeners, []
        logger.debug(f"Cancellation requested (reason={self._reason!r})")
        for listener in listeners:
            try:
                listener(self)
            except Exception:
                logger.exception(f"Cancellation listener {listener!r} failed")

    def add_listener(self, listener: Callable[[CancellationToken], None]) -> None:
        """Register a one-shot listener called when the token is
        cancelled.

        If the token is already cancelled, the listener is called
        immediately.

        Args:
            listener: A callable receiving the token.
        """
        with self._lock:
            if not self._cancelled:
                self._listeners.append(listener)
                return
        listener(self)

    def remove_listener(self, listener: Callable[[CancellationToken], None]) -> None:
        """Unregister a listener. Unknown listeners are ignored.

        Args:
            listener: The listener to remove.
        """
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def exception(self) -> BaseException:
        """Return the exception that represents the cancellation.

        The reason itself is returned when it is an exception, otherwise
        it is wrapped in an ``OperationCancelledError``.

        Returns:
            The cancellation exception.

        Raises:
            RuntimeError: if the token is not cancelled.
        """
        if not self._cancelled:
            msg = "the token has not been cancelled"
            raise RuntimeError(msg)
        if isinstance(self._reason, BaseException):
            return self._reason
        return OperationCancelledError(self._reason)

    def raise_if_cancelled(self) -> None:
        """Raise the cancellation exception if the token is cancelled.

        Example:
            ```pycon
            >>> from aretry import CancellationToken
            >>> token = CancellationToken()
            >>> token.raise_if_cancelled()
            >>> token.cancel(ValueError("stop"))
            >>> token.raise_if_cancelled()
            Traceback (most recent call last):
            ...
            ValueError: stop

            ```
        """
        if self._cancelled:
            raise self.exception()
