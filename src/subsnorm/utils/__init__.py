"""Shared text and timing helpers."""
