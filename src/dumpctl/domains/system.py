"""``dumpctl system`` — host-wide CPU, memory, vm and /proc/stat."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.system import SystemField


class SystemGroup(AggregateGroup):
    CPU = "cpu"
    MEM = "mem"
    VM = "vm"
    STAT = "stat"

    def expand(self, detail: bool) -> list[SystemField]:
        if not detail and self in _CURATED:
            return list(_CURATED[self])
        return [f for f in SystemField.with_prefix(self.value) if f not in _NOT_AGGREGATED]


_CURATED: dict[SystemGroup, tuple[SystemField, ...]] = {
    SystemGroup.CPU: (
        SystemField.CPU_USAGE_PCT,
        SystemField.CPU_USER_PCT,
        SystemField.CPU_SYSTEM_PCT,
    ),
    SystemGroup.MEM: (SystemField.MEM_TOTAL, SystemField.MEM_FREE),
}

# cpu.idx is always -1 on the all-CPU aggregate
_NOT_AGGREGATED = frozenset({SystemField.CPU_IDX})

DEFAULT_SYSTEM_FIELDS = (
    Unit(SystemField.HOSTNAME),
    Unit(CommonField.DATETIME),
    Agg(SystemGroup.CPU),
    Agg(SystemGroup.MEM),
    Agg(SystemGroup.VM),
    Unit(SystemField.KERNEL_VERSION),
    Unit(SystemField.OS_RELEASE),
    Agg(SystemGroup.STAT),
    Unit(CommonField.TIMESTAMP),
)

SYSTEM = DumpDomain(
    name="system",
    about="Dump system stats",
    field_type=SystemField,
    group_type=SystemGroup,
    defaults=DEFAULT_SYSTEM_FIELDS,
    examples=(
        Example('dumpctl system -b "08:30:00" -e "08:30:30" -f datetime vm hostname -O csv'),
    ),
    selectable=False,
)
