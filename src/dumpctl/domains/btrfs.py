"""``dumpctl btrfs`` — btrfs subvolume disk usage."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.disk import BtrfsField


class BtrfsGroup(AggregateGroup):
    DISK_USAGE = "disk_usage"

    def expand(self, detail: bool) -> list[BtrfsField]:
        return [BtrfsField.DISK_FRACTION, BtrfsField.DISK_BYTES]


DEFAULT_BTRFS_FIELDS = (
    Unit(CommonField.DATETIME),
    Unit(BtrfsField.NAME),
    Agg(BtrfsGroup.DISK_USAGE),
    Unit(CommonField.TIMESTAMP),
)

BTRFS = DumpDomain(
    name="btrfs",
    about="Dump btrfs stats",
    field_type=BtrfsField,
    group_type=BtrfsGroup,
    defaults=DEFAULT_BTRFS_FIELDS,
    examples=(
        Example(
            'dumpctl btrfs -b "08:30:00" -e "08:30:30" -f disk_usage -O csv',
            caption="Simple example",
        ),
        Example(
            'dumpctl btrfs -b "08:30:00" -e "08:30:30" -s disk_bytes --rsort --top 5',
            caption=(
                "Output stats for top 5 subvolumes for each time slice"
                " from 08:30:00 to 08:30:30"
            ),
        ),
    ),
)
