"""``dumpctl process`` — per process CPU, memory and I/O."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.process import ProcessField


class ProcessGroup(AggregateGroup):
    CPU = "cpu"
    MEM = "mem"
    IO = "io"

    def expand(self, detail: bool) -> list[ProcessField]:
        if detail:
            return ProcessField.with_prefix(self.value)
        return list(_CURATED[self])


_CURATED: dict[ProcessGroup, tuple[ProcessField, ...]] = {
    ProcessGroup.CPU: (ProcessField.CPU_USAGE_PCT,),
    ProcessGroup.MEM: (ProcessField.MEM_RSS_BYTES,),
    ProcessGroup.IO: (ProcessField.IO_RBYTES_PER_SEC, ProcessField.IO_WBYTES_PER_SEC),
}

DEFAULT_PROCESS_FIELDS = (
    Unit(CommonField.DATETIME),
    Unit(ProcessField.PID),
    Unit(ProcessField.PPID),
    Unit(ProcessField.COMM),
    Unit(ProcessField.STATE),
    Agg(ProcessGroup.CPU),
    Agg(ProcessGroup.MEM),
    Agg(ProcessGroup.IO),
    Unit(ProcessField.UPTIME_SECS),
    Unit(ProcessField.CGROUP),
    Unit(CommonField.TIMESTAMP),
    Unit(ProcessField.CMDLINE),
    Unit(ProcessField.EXE_PATH),
)

PROCESS = DumpDomain(
    name="process",
    about="Dump process stats",
    field_type=ProcessField,
    group_type=ProcessGroup,
    defaults=DEFAULT_PROCESS_FIELDS,
    examples=(
        Example(
            'dumpctl process -b "08:30:00" -e "08:30:30" -f comm cpu io.rwbytes_per_sec -O csv',
            caption="Simple example",
        ),
        Example(
            'dumpctl process -b "08:30:00" -e "08:30:30" -s comm -F "below*" -O json',
            caption='Output stats for all "below*" matched processes from 08:30:00 to 08:30:30',
        ),
        Example(
            'dumpctl process -b "08:30:00" -e "08:30:30" -s cpu.usage_pct --rsort --top 5',
            caption=(
                "Output stats for top 5 CPU intense processes for each time slice"
                " from 08:30:00 to 08:30:30"
            ),
        ),
    ),
)
