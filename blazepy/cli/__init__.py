"""Command line interface for blazepy."""
