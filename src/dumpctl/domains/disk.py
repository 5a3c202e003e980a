"""``dumpctl disk`` — per block device I/O and filesystem usage."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.disk import DiskField


class DiskGroup(AggregateGroup):
    READ = "read"
    WRITE = "write"
    DISCARD = "discard"
    FS_INFO = "fs_info"

    def expand(self, detail: bool) -> list[DiskField]:
        return list(_MEMBERS[self])


_MEMBERS: dict[DiskGroup, tuple[DiskField, ...]] = {
    DiskGroup.READ: (
        DiskField.READ_BYTES_PER_SEC,
        DiskField.READ_COMPLETED,
        DiskField.READ_MERGED,
        DiskField.READ_SECTORS,
        DiskField.TIME_SPEND_READ_MS,
    ),
    DiskGroup.WRITE: (
        DiskField.WRITE_BYTES_PER_SEC,
        DiskField.WRITE_COMPLETED,
        DiskField.WRITE_MERGED,
        DiskField.WRITE_SECTORS,
        DiskField.TIME_SPEND_WRITE_MS,
    ),
    DiskGroup.DISCARD: (
        DiskField.DISCARD_BYTES_PER_SEC,
        DiskField.DISCARD_COMPLETED,
        DiskField.DISCARD_MERGED,
        DiskField.DISCARD_SECTORS,
        DiskField.TIME_SPEND_DISCARD_MS,
    ),
    DiskGroup.FS_INFO: (
        DiskField.DISK_USAGE,
        DiskField.PARTITION_SIZE,
        DiskField.FILESYSTEM_TYPE,
    ),
}

DEFAULT_DISK_FIELDS = (
    Unit(CommonField.DATETIME),
    Unit(DiskField.NAME),
    Unit(DiskField.DISK_TOTAL_BYTES_PER_SEC),
    Unit(DiskField.MAJOR),
    Unit(DiskField.MINOR),
    Agg(DiskGroup.READ),
    Agg(DiskGroup.WRITE),
    Agg(DiskGroup.DISCARD),
    Agg(DiskGroup.FS_INFO),
    Unit(CommonField.TIMESTAMP),
)

DISK = DumpDomain(
    name="disk",
    about="Dump disk stats",
    field_type=DiskField,
    group_type=DiskGroup,
    defaults=DEFAULT_DISK_FIELDS,
    examples=(
        Example(
            'dumpctl disk -b "08:30:00" -e "08:30:30" -f read write discard -O csv',
            caption="Simple example",
        ),
        Example(
            'dumpctl disk -b "08:30:00" -e "08:30:30" -s name -F "nvme0*" -O json',
            caption='Output stats for all "nvme0*" matched disk from 08:30:00 to 08:30:30',
        ),
        Example(
            'dumpctl disk -b "08:30:00" -e "08:30:30" -s read_bytes_per_sec --rsort --top 5',
            caption=(
                "Output stats for top 5 read partitions for each time slice"
                " from 08:30:00 to 08:30:30"
            ),
        ),
    ),
)
