"""
Command line interface for the remote API client
"""

from remoteapi.cli.main import cli, main

__all__ = ["cli", "main"]
