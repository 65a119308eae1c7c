"""Outline writers, one module per rendering library."""
