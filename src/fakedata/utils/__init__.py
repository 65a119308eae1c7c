"""Shared helpers: exception types and logging configuration."""
