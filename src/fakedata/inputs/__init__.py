"""Parsing and validation of submission references and format specifications."""
