"""Shared utilities used by the datasources."""
