"""Validation functions for scan targets."""
