"""Adapters connecting the core to sinks and to the logging module."""
