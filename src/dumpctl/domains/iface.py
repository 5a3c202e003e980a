"""``dumpctl iface`` — link layer stats per network interface."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.network import IfaceField


class IfaceGroup(AggregateGroup):
    RATE = "rate"
    RX = "rx"
    TX = "tx"

    def expand(self, detail: bool) -> list[IfaceField]:
        return list(_MEMBERS[self])


_MEMBERS: dict[IfaceGroup, tuple[IfaceField, ...]] = {
    IfaceGroup.RATE: (
        IfaceField.RX_BYTES_PER_SEC,
        IfaceField.TX_BYTES_PER_SEC,
        IfaceField.THROUGHPUT_PER_SEC,
        IfaceField.RX_PACKETS_PER_SEC,
        IfaceField.TX_PACKETS_PER_SEC,
    ),
    IfaceGroup.RX: (
        IfaceField.RX_BYTES,
        IfaceField.RX_COMPRESSED,
        IfaceField.RX_CRC_ERRORS,
        IfaceField.RX_DROPPED,
        IfaceField.RX_ERRORS,
        IfaceField.RX_FIFO_ERRORS,
        IfaceField.RX_FRAME_ERRORS,
        IfaceField.RX_LENGTH_ERRORS,
        IfaceField.RX_MISSED_ERRORS,
        IfaceField.RX_NOHANDLER,
        IfaceField.RX_OVER_ERRORS,
        IfaceField.RX_PACKETS,
    ),
    IfaceGroup.TX: (
        IfaceField.TX_ABORTED_ERRORS,
        IfaceField.TX_BYTES,
        IfaceField.TX_CARRIER_ERRORS,
        IfaceField.TX_COMPRESSED,
        IfaceField.TX_DROPPED,
        IfaceField.TX_ERRORS,
        IfaceField.TX_FIFO_ERRORS,
        IfaceField.TX_HEARTBEAT_ERRORS,
        IfaceField.TX_PACKETS,
        IfaceField.TX_WINDOW_ERRORS,
    ),
}

DEFAULT_IFACE_FIELDS = (
    Unit(CommonField.DATETIME),
    Unit(IfaceField.COLLISIONS),
    Unit(IfaceField.MULTICAST),
    Unit(IfaceField.INTERFACE),
    Agg(IfaceGroup.RATE),
    Agg(IfaceGroup.RX),
    Agg(IfaceGroup.TX),
    Unit(CommonField.TIMESTAMP),
)

IFACE = DumpDomain(
    name="iface",
    about="Dump the link layer iface stats",
    field_type=IfaceField,
    group_type=IfaceGroup,
    defaults=DEFAULT_IFACE_FIELDS,
    examples=(
        Example(
            'dumpctl iface -b "08:30:00" -e "08:30:30" -f interface rate -O csv',
            caption="Simple example",
        ),
        Example(
            'dumpctl iface -b "08:30:00" -e "08:30:30" -s interface -F "eth*" -O json',
            caption=(
                'Output stats for all iface stats matching pattern "eth*" for time slices'
                " from 08:30:00 to 08:30:30"
            ),
        ),
    ),
)
