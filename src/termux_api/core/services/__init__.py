"""Flows built on top of the capability façade."""
