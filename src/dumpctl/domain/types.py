"""Small closed enums shared across layers."""

from __future__ import annotations

from enum import StrEnum


class OutputFormat(StrEnum):
    """Serialization formats understood by the dump renderers."""

    RAW = "raw"
    CSV = "csv"
    TSV = "tsv"
    JSON = "json"
    KV = "kv"
    OPENMETRICS = "openmetrics"


class FieldSource(StrEnum):
    """Where the resolved field selection came from."""

    FIELDS = "fields"
    PATTERN = "pattern"
    DEFAULT = "default"
    EVERYTHING = "everything"
