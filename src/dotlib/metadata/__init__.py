"""Metadata layer: extraction, schemas, validation and migration of EDN blocks in markdown."""
