"""Service layer — resolves dump requests into structured results."""
