"""
Tests for CLI commands and output rendering.

Covers option handling, request assembly, table/detail/JSON rendering and
error reporting for every command group.
"""
