from __future__ import annotations

"""Configuration utilities for ringcalc.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the sampling, buffer, integral and
report sections.  Instances can be populated from environment variables or
from YAML/JSON files with matching nested keys.
"""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class SamplingSettings(SectionModel):
    """How the sampled function is laid out in the store.

    ``resolution_factor`` samples are taken per unit of ``x``, so the time
    step is ``1 / resolution_factor`` and the store holds
    ``sample_count * resolution_factor`` samples.
    """

    sample_count: int = Field(default=10, gt=0)
    resolution_factor: int = Field(default=1000, gt=0)
    function: str = "cube"

    @property
    def dt(self) -> float:
        return 1.0 / self.resolution_factor

    @property
    def capacity(self) -> int:
        return self.sample_count * self.resolution_factor


class BufferSettings(SectionModel):
    """Sample store options."""

    boundary: Literal["clamp", "wrap"] = "clamp"


class IntegralSettings(SectionModel):
    """Integration rule selection."""

    method: Literal["wrap_aware", "trapezoidal"] = "wrap_aware"


class ReportSettings(SectionModel):
    """Console output controls."""

    precision: int = Field(default=2, ge=0)
    show_all: bool = False


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    sampling: SamplingSettings = Field(default_factory=SamplingSettings)
    buffer: BufferSettings = Field(default_factory=BufferSettings)
    integral: IntegralSettings = Field(default_factory=IntegralSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    model_config = SettingsConfigDict(
        env_prefix="RINGCALC_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
