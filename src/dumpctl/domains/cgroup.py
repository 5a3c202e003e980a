"""``dumpctl cgroup`` — per cgroup CPU, memory, I/O and pressure."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.cgroup import CgroupField


class CgroupGroup(AggregateGroup):
    CPU = "cpu"
    MEM = "mem"
    IO = "io"
    PRESSURE = "pressure"

    def expand(self, detail: bool) -> list[CgroupField]:
        if detail:
            return CgroupField.with_prefix(self.value)
        return list(_CURATED[self])


_CURATED: dict[CgroupGroup, tuple[CgroupField, ...]] = {
    CgroupGroup.CPU: (CgroupField.CPU_USAGE_PCT,),
    CgroupGroup.MEM: (CgroupField.MEM_TOTAL,),
    CgroupGroup.IO: (CgroupField.IO_RBYTES_PER_SEC, CgroupField.IO_WBYTES_PER_SEC),
    CgroupGroup.PRESSURE: (
        CgroupField.PRESSURE_CPU_SOME_PCT,
        CgroupField.PRESSURE_MEMORY_FULL_PCT,
        CgroupField.PRESSURE_IO_FULL_PCT,
    ),
}

DEFAULT_CGROUP_FIELDS = (
    Unit(CgroupField.NAME),
    Unit(CgroupField.INODE_NUMBER),
    Unit(CommonField.DATETIME),
    Agg(CgroupGroup.CPU),
    Agg(CgroupGroup.MEM),
    Agg(CgroupGroup.IO),
    Agg(CgroupGroup.PRESSURE),
    Unit(CommonField.TIMESTAMP),
)

CGROUP = DumpDomain(
    name="cgroup",
    about="Dump cgroup stats",
    field_type=CgroupField,
    group_type=CgroupGroup,
    defaults=DEFAULT_CGROUP_FIELDS,
    examples=(
        Example(
            'dumpctl cgroup -b "08:30:00" -e "08:30:30" -f name cpu -O csv',
            caption="Simple example",
        ),
        Example(
            'dumpctl cgroup -b "08:30:00" -e "08:30:30" -s name -F "below*" -O json',
            caption=(
                'Output stats for all cgroups matching pattern "below*" for time slices'
                " from 08:30:00 to 08:30:30"
            ),
        ),
        Example(
            'dumpctl cgroup -b "08:30:00" -e "08:30:30" -s cpu.usage_pct --rsort --top 5',
            caption=(
                "Output stats for top 5 CPU intense cgroups for each time slice"
                " from 08:30:00 to 08:30:30"
            ),
        ),
    ),
)
