"""Per block device model, plus btrfs subvolume usage."""

from __future__ import annotations

from dumpctl.domain.fields import FieldId


class DiskField(FieldId):
    NAME = "name"
    DISK_USAGE = "disk_usage"
    PARTITION_SIZE = "partition_size"
    FILESYSTEM_TYPE = "filesystem_type"
    READ_BYTES_PER_SEC = "read_bytes_per_sec"
    WRITE_BYTES_PER_SEC = "write_bytes_per_sec"
    DISCARD_BYTES_PER_SEC = "discard_bytes_per_sec"
    DISK_TOTAL_BYTES_PER_SEC = "disk_total_bytes_per_sec"
    READ_COMPLETED = "read_completed"
    READ_MERGED = "read_merged"
    READ_SECTORS = "read_sectors"
    TIME_SPEND_READ_MS = "time_spend_read_ms"
    WRITE_COMPLETED = "write_completed"
    WRITE_MERGED = "write_merged"
    WRITE_SECTORS = "write_sectors"
    TIME_SPEND_WRITE_MS = "time_spend_write_ms"
    DISCARD_COMPLETED = "discard_completed"
    DISCARD_MERGED = "discard_merged"
    DISCARD_SECTORS = "discard_sectors"
    TIME_SPEND_DISCARD_MS = "time_spend_discard_ms"
    MAJOR = "major"
    MINOR = "minor"


class BtrfsField(FieldId):
    NAME = "name"
    DISK_FRACTION = "disk_fraction"
    DISK_BYTES = "disk_bytes"
