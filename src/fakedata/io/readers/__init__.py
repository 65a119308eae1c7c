"""Readers for reference list files."""
