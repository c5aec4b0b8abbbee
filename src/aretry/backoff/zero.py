r"""Zero backoff strategy."""

from __future__ import annotations

__all__ = ["ZeroBackoff", "zero"]

from aretry.backoff.base import BaseBackoffStrategy


class ZeroBackoff(BaseBackoffStrategy):
    """Backoff strategy that retries immediately.

    Example:
        ```pycon
        >>> from aretry.backoff import ZeroBackoff
        >>> ZeroBackoff().next_backoff()
        0

        ```
    """

    def next_backoff(self) -> float:
        return 0

    def reset_backoff(self) -> None:
        pass


def zero() -> ZeroBackoff:
    r"""Create a ``ZeroBackoff``."""
    return ZeroBackoff()
