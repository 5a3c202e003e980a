"""dumpctl — field selection and aggregation for statistics dumps."""

__version__ = "0.1.0"
