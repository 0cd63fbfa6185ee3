"""Service configuration read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SAMPLE_DATA = "12, 15, 18, 20, 22, 25, 28, 30, 32, 35, 38, 40, 42, 45, 48"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    sample_data: str = DEFAULT_SAMPLE_DATA
    preload_sample: bool = True
    max_bins: int = 10


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build settings from the environment (cached, call ``cache_clear`` to reload).
    Raises ValueError if STATCALC_MAX_BINS is below 1.
    """
    max_bins = int(os.environ.get("STATCALC_MAX_BINS", 10))  # Upper bound on histogram bins
    if max_bins < 1:
        raise ValueError(f"STATCALC_MAX_BINS must be at least 1, got {max_bins}")
    return Settings(
        log_level=os.environ.get("STATCALC_LOG_LEVEL", "INFO").upper(),  # Root logger level
        sample_data=os.environ.get("STATCALC_SAMPLE_DATA", DEFAULT_SAMPLE_DATA),  # Calculated on startup
        preload_sample=os.environ.get("STATCALC_PRELOAD_SAMPLE", "1") == "1",  # Set to 0 to start empty
        max_bins=max_bins,
    )
