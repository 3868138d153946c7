"""
Hiking settings using pydantic-settings for type-safe configuration.

Values come from HIKING_* environment variables or a .env file, with
defaults suited to running the bundled example hike. Command line flags
override them.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hiking.models import ComputeMode
from hiking.solver.trace import TraceOptions

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_EVENT_FILE = DATA_DIR / "hiking_event_default.yaml"

_MODE_ALIASES = {
    "optimized": ComputeMode.OPTIMIZED,
    "brute_force": ComputeMode.BRUTE_FORCE,
    "brute-force": ComputeMode.BRUTE_FORCE,
    "all_combinations": ComputeMode.BRUTE_FORCE,
}


class Settings(BaseSettings):
    """Hiking settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Computation ===
    compute_mode: ComputeMode = Field(
        default=ComputeMode.OPTIMIZED,
        description="Engine used for the hike: 'optimized' or 'brute_force'",
    )
    event_file: Path | None = Field(
        default=None,
        description="Event file to compute (defaults to the bundled example hike)",
    )
    validate_engines: bool = Field(
        default=True,
        description="Check that both engines agree on the bundled fixtures before computing",
    )

    # === Trace output ===
    trace_roster: bool = Field(default=False, description="Trace roster additions and ordering")
    trace_intermediate: bool = Field(default=False, description="Trace per-bridge and cumulative times")
    trace_steps: bool = Field(default=False, description="Trace strategy choices and explored paths")
    trace_timing: bool = Field(default=False, description="Trace computation durations")

    @field_validator("compute_mode", mode="before")
    @classmethod
    def parse_compute_mode(cls, v: str | ComputeMode) -> ComputeMode:
        """Accept 'optimized', 'brute_force', 'brute-force' or 'all_combinations'."""
        if isinstance(v, ComputeMode):
            return v
        mode = _MODE_ALIASES.get(str(v).strip().lower())
        if mode is None:
            raise ValueError(f"Invalid compute mode: {v}. Must be 'optimized' or 'brute_force'")
        return mode

    def trace_options(self) -> TraceOptions:
        return TraceOptions(
            trace_roster=self.trace_roster,
            trace_intermediate=self.trace_intermediate,
            trace_steps=self.trace_steps,
            trace_timing=self.trace_timing,
        )

    def resolved_event_file(self) -> Path:
        return self.event_file or DEFAULT_EVENT_FILE


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    """
    return Settings()
