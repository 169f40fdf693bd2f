"""Command-line interface for nxgraph."""
