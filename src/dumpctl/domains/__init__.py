"""Dump domains, one per ``dumpctl`` subcommand.

Each module declares its aggregate groups, their curated and full
expansions, the default field list, and example invocations.
"""

from __future__ import annotations

from dumpctl.domain.registry import DumpDomain
from dumpctl.domains.btrfs import BTRFS
from dumpctl.domains.cgroup import CGROUP
from dumpctl.domains.disk import DISK
from dumpctl.domains.iface import IFACE
from dumpctl.domains.network import NETWORK
from dumpctl.domains.process import PROCESS
from dumpctl.domains.system import SYSTEM
from dumpctl.domains.transport import TRANSPORT

ALL_DOMAINS: tuple[DumpDomain, ...] = (
    SYSTEM,
    DISK,
    BTRFS,
    PROCESS,
    CGROUP,
    IFACE,
    NETWORK,
    TRANSPORT,
)

__all__ = [
    "ALL_DOMAINS",
    "BTRFS",
    "CGROUP",
    "DISK",
    "IFACE",
    "NETWORK",
    "PROCESS",
    "SYSTEM",
    "TRANSPORT",
]
