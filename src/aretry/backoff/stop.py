r"""Stop backoff strategy."""

from __future__ import annotations

__all__ = ["StopBackoff", "stop"]

from aretry.backoff.base import STOP, BaseBackoffStrategy, Stop


class StopBackoff(BaseBackoffStrategy):
    """Backoff strategy that never retries.

    Every call to ``next_backoff`` returns ``STOP``, so a retry loop using
    it makes a single attempt.

    Example:
        ```pycon
        >>> from aretry.backoff import StopBackoff
        >>> StopBackoff().next_backoff()
        STOP

        ```
    """

    def next_backoff(self) -> Stop:
        return STOP

    def reset_backoff(self) -> None:
        pass


def stop() -> StopBackoff:
    r"""Create a ``StopBackoff``."""
    return StopBackoff()
