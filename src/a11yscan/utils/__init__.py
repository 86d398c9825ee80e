"""Shared helpers for logging, debug tracing and async execution."""
