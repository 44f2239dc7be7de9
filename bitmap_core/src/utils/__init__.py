"""Logging, configuration and array conversion helpers."""
