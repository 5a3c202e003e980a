"""``dumpctl network`` — network layer (ip, icmp) counters."""

from __future__ import annotations

from dumpctl.domain.fields import AggregateGroup, CommonField
from dumpctl.domain.options import Agg, Unit
from dumpctl.domain.registry import DumpDomain, Example
from dumpctl.models.network import NetworkField


class NetworkGroup(AggregateGroup):
    IP = "ip"
    IP6 = "ip6"
    ICMP = "icmp"
    ICMP6 = "icmp6"

    def expand(self, detail: bool) -> list[NetworkField]:
        return NetworkField.with_prefix(self.value)


DEFAULT_NETWORK_FIELDS = (
    Unit(CommonField.DATETIME),
    Agg(NetworkGroup.IP),
    Agg(NetworkGroup.IP6),
    Agg(NetworkGroup.ICMP),
    Agg(NetworkGroup.ICMP6),
    Unit(CommonField.TIMESTAMP),
)

NETWORK = DumpDomain(
    name="network",
    about="Dump the network layer stats including ip and icmp",
    field_type=NetworkField,
    group_type=NetworkGroup,
    defaults=DEFAULT_NETWORK_FIELDS,
    examples=(
        Example(
            'dumpctl network -b "08:30:00" -e "08:30:30" -f ip ip6 -O json',
            caption="Example",
        ),
    ),
    selectable=False,
)
