"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``dumpctl.toml`` only holds
overrides and saved field patterns.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dumpctl.domain.types import OutputFormat

# Saved pattern: preset name -> ordered field tokens.
PatternTable = dict[str, list[str]]


class OutputConfig(BaseModel):
    """[output] section — defaults for the renderer flags."""

    model_config = {"frozen": True}

    format: OutputFormat = OutputFormat.RAW
    disable_title: bool = False
    repeat_title: int | None = Field(default=None, ge=1)
    br: str | None = None
    raw: bool = False


class PatternsConfig(BaseModel):
    """[patterns.<domain>] sections used by ``--pattern``."""

    model_config = {"frozen": True}

    system: PatternTable = Field(default_factory=dict)
    disk: PatternTable = Field(default_factory=dict)
    btrfs: PatternTable = Field(default_factory=dict)
    process: PatternTable = Field(default_factory=dict)
    cgroup: PatternTable = Field(default_factory=dict)
    iface: PatternTable = Field(default_factory=dict)
    network: PatternTable = Field(default_factory=dict)
    transport: PatternTable = Field(default_factory=dict)

    def for_domain(self, domain: str) -> PatternTable:
        """Saved patterns for *domain* (empty if the section is absent)."""
        return getattr(self, domain, None) or {}


class DumpConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
    patterns: PatternsConfig = Field(default_factory=PatternsConfig)
