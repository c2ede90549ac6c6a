"""Formatting, batching, logging and terminal helpers."""
