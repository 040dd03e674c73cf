"""Integration tests for whimsical-exporter.

These tests run the export engine and the export command against an
in-memory Whimsical session and a real temporary directory. They cover
whole runs: idempotence, resuming after an interruption, pagination and
the exported item count.
"""
