# config.py
from dataclasses import dataclass, replace
from typing import Any, Self

VALID_TIME_UNITS = ("s", "ms", "us", "ns")


@dataclass(frozen=True)
class Config:
    """Immutable configuration for building Arrow arrays out of fields."""

    # unit of the timestamp type used for time fields
    time_unit: str = "ms"
    # use large_string instead of string for string/other fields
    use_large_string: bool = False
    # values treated as missing when building arrays
    null_values: tuple[Any, ...] = (None,)

    def __post_init__(self) -> None:
        if self.time_unit not in VALID_TIME_UNITS:
            raise ValueError(
                f"time_unit must be one of {VALID_TIME_UNITS}, got '{self.time_unit}'"
            )

    def with_updates(self, **kwargs) -> Self:
        """Create a new Config instance with updated values."""
        return replace(self, **kwargs)


# Module-level default config - created at import time
DEFAULT_CONFIG = Config()


def resolve_config(config: Config | None) -> Config:
    return DEFAULT_CONFIG if config is None else config
