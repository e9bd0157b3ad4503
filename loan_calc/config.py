"""Configuration management for loan-calc."""

import os
from dataclasses import dataclass, field

from loan_calc.exceptions import ConfigurationError
from loan_calc.models import DayCountConvention

OUTPUT_FORMATS = ("table", "json")
LOG_FORMATS = ("standard", "json")


@dataclass
class OutputConfig:
    """Console output configuration."""

    format: str = "table"
    max_schedule_rows: int | None = None  # None shows every day


@dataclass
class LoanCalcConfig:
    """Main configuration for loan-calc."""

    day_count: DayCountConvention = DayCountConvention.ACT_365
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format: {self.output.format!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format!r}")
        if self.output.max_schedule_rows is not None and self.output.max_schedule_rows < 1:
            raise ConfigurationError("max_schedule_rows must be at least 1")

    @classmethod
    def from_env(cls) -> "LoanCalcConfig":
        """Create config from environment variables."""
        day_count_str = os.getenv("LOAN_CALC_DAY_COUNT", DayCountConvention.ACT_365.value)
        try:
            day_count = DayCountConvention(day_count_str.upper())
        except ValueError:
            raise ConfigurationError(f"Unknown day-count convention: {day_count_str!r}") from None

        output = OutputConfig(
            format=os.getenv("LOAN_CALC_OUTPUT", "table").lower(),
            max_schedule_rows=_int_env("LOAN_CALC_MAX_ROWS"),
        )

        return cls(
            day_count=day_count,
            output=output,
            log_level=os.getenv("LOAN_CALC_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOAN_CALC_LOG_FORMAT", "standard").lower(),
            seed=_int_env("LOAN_CALC_SEED"),
        )


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
