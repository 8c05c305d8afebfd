"""dotlib: shared config and metadata utilities for the ADR, RunNote and Requirements toolkits."""

__version__ = "0.1.0"
