"""Shared path and logging helpers."""
