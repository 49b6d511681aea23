"""Domain layer for the table importer.

This layer contains the type detection and conversion logic.
It is independent of file access, logging and the CLI.
"""
