r"""Default configuration values for retries and backoff strategies.

All delays are expressed in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "MAX_DELAY",
    "MAX_SAFE_INTEGER",
    "RETRY_STATUS_CODES",
]

# Largest delay a single wait accepts (2^31 - 1 milliseconds, about 24.8 days).
MAX_DELAY: int = 2**31 - 1

# Largest integer exactly representable by a double precision float.
MAX_SAFE_INTEGER: int = 2**53 - 1

# Default number of retries used by the HTTP helpers.
DEFAULT_MAX_RETRIES: int = 3

# Default base delay (ms) of the exponential backoff used by the HTTP helpers.
DEFAULT_BASE_DELAY: int = 300

# Default cap (ms) of the exponential backoff used by the HTTP helpers.
DEFAULT_MAX_DELAY: int = 30_000

# HTTP status codes that trigger a retry by default.
RETRY_STATUS_CODES: tuple[int, ...] = (429, 500, 502, 503, 504)

# Default timeout (seconds) of the clients created by the HTTP helpers.
DEFAULT_TIMEOUT: float = 10.0
