"""Core: configuration, errors, domain values and process execution."""
