"""Tests for FieldId parsing, rendering and enumeration."""

from __future__ import annotations

import pytest

from dumpctl.domain.errors import DumpError, UnknownFieldError
from dumpctl.domain.fields import CommonField, FieldId
from dumpctl.domains import ALL_DOMAINS
from dumpctl.models.network import NetworkField
from dumpctl.models.system import SystemField


class TestCommonField:
    def test_enumeration_order(self) -> None:
        assert CommonField.members() == [CommonField.TIMESTAMP, CommonField.DATETIME]

    def test_render(self) -> None:
        assert CommonField.DATETIME.render() == "datetime"

    def test_parse_is_case_insensitive(self) -> None:
        assert CommonField.parse("DateTime") is CommonField.DATETIME


class TestParse:
    def test_dotted_name(self) -> None:
        assert SystemField.parse("cpu.usage_pct") is SystemField.CPU_USAGE_PCT

    def test_upper_case_dotted_name(self) -> None:
        assert SystemField.parse("CPU.USAGE_PCT") is SystemField.CPU_USAGE_PCT

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownFieldError) as exc_info:
            SystemField.parse("cpu.bogus")
        assert exc_info.value.token == "cpu.bogus"
        assert str(exc_info.value) == "unrecognized field: cpu.bogus"

    def test_unknown_is_value_error_and_dump_error(self) -> None:
        with pytest.raises(ValueError):
            SystemField.parse("nope")
        with pytest.raises(DumpError):
            SystemField.parse("nope")

    def test_member_name_is_not_a_token(self) -> None:
        """Python attribute names are not accepted, only canonical names."""
        with pytest.raises(UnknownFieldError):
            SystemField.parse("CPU_USAGE_PCT")


class TestRoundTrip:
    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_every_field_round_trips(self, domain) -> None:
        for member in domain.field_type.members():
            assert domain.field_type.parse(member.render()) is member

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_every_group_round_trips(self, domain) -> None:
        for group in domain.group_type.members():
            assert domain.group_type.parse(group.render()) is group

    @pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
    def test_canonical_names_are_lower_case(self, domain) -> None:
        for member in domain.field_type.members():
            assert member.render() == member.render().lower()


class TestWithPrefix:
    def test_keeps_declaration_order(self) -> None:
        members = SystemField.with_prefix("cpu")
        assert members[0] is SystemField.CPU_IDX
        assert SystemField.CPU_USAGE_PCT in members
        assert all(m.value.startswith("cpu.") for m in members)

    def test_prefix_is_a_whole_segment(self) -> None:
        """``ip`` does not pick up ``ip6.*`` and ``udp`` does not pick up ``udp6.*``."""
        assert not any(m.value.startswith("ip6.") for m in NetworkField.with_prefix("ip"))
        assert not any(m.value.startswith("udp6.") for m in NetworkField.with_prefix("udp"))

    def test_unknown_prefix_is_empty(self) -> None:
        assert SystemField.with_prefix("gpu") == []


class TestBaseContract:
    def test_field_id_is_a_str(self) -> None:
        assert isinstance(SystemField.HOSTNAME, str)
        assert issubclass(SystemField, FieldId)
