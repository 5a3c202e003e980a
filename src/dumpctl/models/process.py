"""Per process model."""

from __future__ import annotations

from dumpctl.domain.fields import FieldId


class ProcessField(FieldId):
    PID = "pid"
    PPID = "ppid"
    NS_TGID = "ns_tgid"
    COMM = "comm"
    STATE = "state"
    UPTIME_SECS = "uptime_secs"
    CGROUP = "cgroup"

    IO_RBYTES_PER_SEC = "io.rbytes_per_sec"
    IO_WBYTES_PER_SEC = "io.wbytes_per_sec"
    IO_RWBYTES_PER_SEC = "io.rwbytes_per_sec"

    MEM_MINORFAULTS_PER_SEC = "mem.minorfaults_per_sec"
    MEM_MAJORFAULTS_PER_SEC = "mem.majorfaults_per_sec"
    MEM_RSS_BYTES = "mem.rss_bytes"
    MEM_VM_SIZE = "mem.vm_size"
    MEM_LOCK = "mem.lock"
    MEM_PIN = "mem.pin"
    MEM_ANON = "mem.anon"
    MEM_FILE = "mem.file"
    MEM_SHMEM = "mem.shmem"
    MEM_PTE = "mem.pte"
    MEM_SWAP = "mem.swap"
    MEM_HUGE_TLB = "mem.huge_tlb"

    CPU_USAGE_PCT = "cpu.usage_pct"
    CPU_USER_PCT = "cpu.user_pct"
    CPU_SYSTEM_PCT = "cpu.system_pct"
    CPU_NUM_THREADS = "cpu.num_threads"

    CMDLINE = "cmdline"
    EXE_PATH = "exe_path"
