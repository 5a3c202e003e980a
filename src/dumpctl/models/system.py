"""System-wide model: host identity, /proc/stat, total CPU, memory, vm."""

from __future__ import annotations

from dumpctl.domain.fields import FieldId


class SystemField(FieldId):
    HOSTNAME = "hostname"
    KERNEL_VERSION = "kernel_version"
    OS_RELEASE = "os_release"

    STAT_TOTAL_INTERRUPT_CT = "stat.total_interrupt_ct"
    STAT_CONTEXT_SWITCHES = "stat.context_switches"
    STAT_BOOT_TIME_EPOCH_SECS = "stat.boot_time_epoch_secs"
    STAT_TOTAL_PROCESSES = "stat.total_processes"
    STAT_RUNNING_PROCESSES = "stat.running_processes"
    STAT_BLOCKED_PROCESSES = "stat.blocked_processes"

    # cpu.* is the aggregate over all CPUs
    CPU_IDX = "cpu.idx"
    CPU_USAGE_PCT = "cpu.usage_pct"
    CPU_USER_PCT = "cpu.user_pct"
    CPU_IDLE_PCT = "cpu.idle_pct"
    CPU_SYSTEM_PCT = "cpu.system_pct"
    CPU_NICE_PCT = "cpu.nice_pct"
    CPU_IOWAIT_PCT = "cpu.iowait_pct"
    CPU_IRQ_PCT = "cpu.irq_pct"
    CPU_SOFTIRQ_PCT = "cpu.softirq_pct"
    CPU_STOLEN_PCT = "cpu.stolen_pct"
    CPU_GUEST_PCT = "cpu.guest_pct"
    CPU_GUEST_NICE_PCT = "cpu.guest_nice_pct"

    MEM_TOTAL = "mem.total"
    MEM_FREE = "mem.free"
    MEM_AVAILABLE = "mem.available"
    MEM_BUFFERS = "mem.buffers"
    MEM_CACHED = "mem.cached"
    MEM_SWAP_CACHED = "mem.swap_cached"
    MEM_ACTIVE = "mem.active"
    MEM_INACTIVE = "mem.inactive"
    MEM_ANON = "mem.anon"
    MEM_FILE = "mem.file"
    MEM_UNEVICTABLE = "mem.unevictable"
    MEM_MLOCKED = "mem.mlocked"
    MEM_SWAP_TOTAL = "mem.swap_total"
    MEM_SWAP_FREE = "mem.swap_free"
    MEM_DIRTY = "mem.dirty"
    MEM_WRITEBACK = "mem.writeback"
    MEM_ANON_PAGES = "mem.anon_pages"
    MEM_MAPPED = "mem.mapped"
    MEM_SHMEM = "mem.shmem"
    MEM_KRECLAIMABLE = "mem.kreclaimable"
    MEM_SLAB = "mem.slab"
    MEM_SLAB_RECLAIMABLE = "mem.slab_reclaimable"
    MEM_SLAB_UNRECLAIMABLE = "mem.slab_unreclaimable"
    MEM_KERNEL_STACK = "mem.kernel_stack"
    MEM_PAGE_TABLES = "mem.page_tables"
    MEM_ANON_HUGE_PAGES_BYTES = "mem.anon_huge_pages_bytes"
    MEM_SHMEM_HUGE_PAGES_BYTES = "mem.shmem_huge_pages_bytes"
    MEM_FILE_HUGE_PAGES_BYTES = "mem.file_huge_pages_bytes"
    MEM_HUGETLB = "mem.hugetlb"
    MEM_CMA_TOTAL = "mem.cma_total"
    MEM_CMA_FREE = "mem.cma_free"
    MEM_VMALLOC_TOTAL = "mem.vmalloc_total"
    MEM_VMALLOC_USED = "mem.vmalloc_used"
    MEM_VMALLOC_CHUNK = "mem.vmalloc_chunk"
    MEM_DIRECT_MAP_4K = "mem.direct_map_4k"
    MEM_DIRECT_MAP_2M = "mem.direct_map_2m"
    MEM_DIRECT_MAP_1G = "mem.direct_map_1g"

    VM_PGPGIN_PER_SEC = "vm.pgpgin_per_sec"
    VM_PGPGOUT_PER_SEC = "vm.pgpgout_per_sec"
    VM_PSWPIN_PER_SEC = "vm.pswpin_per_sec"
    VM_PSWPOUT_PER_SEC = "vm.pswpout_per_sec"
    VM_PGSTEAL_KSWAPD = "vm.pgsteal_kswapd"
    VM_PGSTEAL_DIRECT = "vm.pgsteal_direct"
    VM_PGSCAN_KSWAPD = "vm.pgscan_kswapd"
    VM_PGSCAN_DIRECT = "vm.pgscan_direct"
    VM_OOM_KILL = "vm.oom_kill"
