# =============================================================================
# coinley/settings.py  -  Runtime settings from the environment
# =============================================================================
#
# Every setting is optional.  With nothing set the adapter behaves exactly
# like a bare launch: no explicit HTTP timeout, INFO logging.
#
#   COINLEY_HTTP_TIMEOUT   seconds per outbound request (float)
#   COINLEY_LOG_LEVEL      logging level name (DEBUG, INFO, ...)
#
# The server entry point calls load_dotenv() first, so a local .env file
# works the same as exported variables.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    http_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from COINLEY_* environment variables.

        Raises:
            ValueError: if COINLEY_HTTP_TIMEOUT is set but not a positive number.
        """
        raw_timeout = os.environ.get("COINLEY_HTTP_TIMEOUT", "").strip()
        timeout = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"COINLEY_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise ValueError("COINLEY_HTTP_TIMEOUT must be greater than zero")

        log_level = os.environ.get("COINLEY_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(http_timeout=timeout, log_level=log_level)
