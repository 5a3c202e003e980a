"""``dumpctl transport`` — transport layer (tcp, udp) counters."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.network import NetworkField


class TransportGroup(AggregateGroup):
    TCP = "tcp"
    UDP = "udp"
    UDP6 = "udp6"

    def expand(self, detail: bool) -> list[NetworkField]:
        return NetworkField.with_prefix(self.value)


DEFAULT_TRANSPORT_FIELDS = (
    Unit(CommonField.DATETIME),
    Agg(TransportGroup.TCP),
    Agg(TransportGroup.UDP),
    Agg(TransportGroup.UDP6),
    Unit(CommonField.TIMESTAMP),
)

TRANSPORT = DumpDomain(
    name="transport",
    about="Dump the transport layer stats including tcp and udp",
    field_type=NetworkField,
    group_type=TransportGroup,
    defaults=DEFAULT_TRANSPORT_FIELDS,
    examples=(
        Example(
            'dumpctl transport -b "08:30:00" -e "08:30:30" -f tcp udp -O json',
            caption="Example",
        ),
    ),
    selectable=False,
)
