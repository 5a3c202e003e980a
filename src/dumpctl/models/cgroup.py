"""Per cgroup model."""

from __future__ import annotations

from dumpctl.domain.fields import FieldId


class CgroupField(FieldId):
    NAME = "name"
    FULL_PATH = "full_path"
    INODE_NUMBER = "inode_number"
    DEPTH = "depth"

    CPU_USAGE_PCT = "cpu.usage_pct"
    CPU_USER_PCT = "cpu.user_pct"
    CPU_SYSTEM_PCT = "cpu.system_pct"
    CPU_NR_PERIODS_PER_SEC = "cpu.nr_periods_per_sec"
    CPU_NR_THROTTLED_PER_SEC = "cpu.nr_throttled_per_sec"
    CPU_THROTTLED_PCT = "cpu.throttled_pct"

    IO_RBYTES_PER_SEC = "io.rbytes_per_sec"
    IO_WBYTES_PER_SEC = "io.wbytes_per_sec"
    IO_RIOS_PER_SEC = "io.rios_per_sec"
    IO_WIOS_PER_SEC = "io.wios_per_sec"
    IO_DBYTES_PER_SEC = "io.dbytes_per_sec"
    IO_DIOS_PER_SEC = "io.dios_per_sec"
    IO_RWBYTES_PER_SEC = "io.rwbytes_per_sec"
    IO_COST_USAGE_PCT = "io.cost_usage_pct"
    IO_COST_WAIT_PCT = "io.cost_wait_pct"
    IO_COST_INDEBT_PCT = "io.cost_indebt_pct"
    IO_COST_INDELAY_PCT = "io.cost_indelay_pct"

    MEM_TOTAL = "mem.total"
    MEM_SWAP = "mem.swap"
    MEM_ANON = "mem.anon"
    MEM_FILE = "mem.file"
    MEM_KERNEL_STACK = "mem.kernel_stack"
    MEM_SLAB = "mem.slab"
    MEM_SOCK = "mem.sock"
    MEM_SHMEM = "mem.shmem"
    MEM_FILE_MAPPED = "mem.file_mapped"
    MEM_FILE_DIRTY = "mem.file_dirty"
    MEM_FILE_WRITEBACK = "mem.file_writeback"
    MEM_ANON_THP = "mem.anon_thp"
    MEM_INACTIVE_ANON = "mem.inactive_anon"
    MEM_ACTIVE_ANON = "mem.active_anon"
    MEM_INACTIVE_FILE = "mem.inactive_file"
    MEM_ACTIVE_FILE = "mem.active_file"
    MEM_UNEVICTABLE = "mem.unevictable"
    MEM_SLAB_RECLAIMABLE = "mem.slab_reclaimable"
    MEM_SLAB_UNRECLAIMABLE = "mem.slab_unreclaimable"
    MEM_PGFAULT = "mem.pgfault"
    MEM_PGMAJFAULT = "mem.pgmajfault"
    MEM_WORKINGSET_REFAULT_ANON = "mem.workingset_refault_anon"
    MEM_WORKINGSET_REFAULT_FILE = "mem.workingset_refault_file"
    MEM_WORKINGSET_ACTIVATE_ANON = "mem.workingset_activate_anon"
    MEM_WORKINGSET_ACTIVATE_FILE = "mem.workingset_activate_file"
    MEM_WORKINGSET_RESTORE_ANON = "mem.workingset_restore_anon"
    MEM_WORKINGSET_RESTORE_FILE = "mem.workingset_restore_file"
    MEM_WORKINGSET_NODERECLAIM = "mem.workingset_nodereclaim"
    MEM_PGREFILL = "mem.pgrefill"
    MEM_PGSCAN = "mem.pgscan"
    MEM_PGSTEAL = "mem.pgsteal"
    MEM_PGACTIVATE = "mem.pgactivate"
    MEM_PGDEACTIVATE = "mem.pgdeactivate"
    MEM_PGLAZYFREE = "mem.pglazyfree"
    MEM_PGLAZYFREED = "mem.pglazyfreed"
    MEM_THP_FAULT_ALLOC = "mem.thp_fault_alloc"
    MEM_THP_COLLAPSE_ALLOC = "mem.thp_collapse_alloc"
    MEM_MEMORY_HIGH = "mem.memory_high"
    MEM_EVENTS_LOW = "mem.events_low"
    MEM_EVENTS_HIGH = "mem.events_high"
    MEM_EVENTS_MAX = "mem.events_max"
    MEM_EVENTS_OOM = "mem.events_oom"
    MEM_EVENTS_OOM_KILL = "mem.events_oom_kill"

    PRESSURE_CPU_SOME_PCT = "pressure.cpu_some_pct"
    PRESSURE_CPU_FULL_PCT = "pressure.cpu_full_pct"
    PRESSURE_IO_SOME_PCT = "pressure.io_some_pct"
    PRESSURE_IO_FULL_PCT = "pressure.io_full_pct"
    PRESSURE_MEMORY_SOME_PCT = "pressure.memory_some_pct"
    PRESSURE_MEMORY_FULL_PCT = "pressure.memory_full_pct"
