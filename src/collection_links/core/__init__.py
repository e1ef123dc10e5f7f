"""Run configuration, root resolution, and diagnostics shared by the validator and CLI."""
