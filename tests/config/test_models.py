"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from dumpctl.config.models import DumpConfig, OutputConfig, PatternsConfig
from dumpctl.domain.types import OutputFormat
from dumpctl.domains import ALL_DOMAINS


class TestOutputConfig:
    def test_defaults(self) -> None:
        cfg = OutputConfig()
        assert cfg.format is OutputFormat.RAW
        assert cfg.disable_title is False
        assert cfg.repeat_title is None

    @pytest.mark.parametrize("value", ["raw", "csv", "tsv", "json", "kv", "openmetrics"])
    def test_formats(self, value: str) -> None:
        assert OutputConfig(format=value).format == value

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(format="xml")

    def test_repeat_title_positive(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(repeat_title=0)


class TestPatternsConfig:
    def test_section_per_domain(self) -> None:
        names = set(PatternsConfig.model_fields)
        assert names == {d.name for d in ALL_DOMAINS}

    def test_for_domain(self) -> None:
        cfg = PatternsConfig(process={"top": ["pid", "cpu"]})
        assert cfg.for_domain("process") == {"top": ["pid", "cpu"]}
        assert cfg.for_domain("disk") == {}
        assert cfg.for_domain("unknown") == {}

    def test_tokens_must_be_strings(self) -> None:
        with pytest.raises(ValidationError):
            PatternsConfig(disk={"bad": "name"})


def test_root_config_sections() -> None:
    cfg = DumpConfig.model_validate({"output": {"raw": True}})
    assert cfg.output.raw is True
    assert cfg.patterns == PatternsConfig()
