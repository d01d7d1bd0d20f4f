"""Variant effect resolution for SnpEff-annotated call sets."""

__version__ = "0.1.0"
