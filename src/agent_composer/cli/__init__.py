"""Command-line interface for Agent Composer."""
