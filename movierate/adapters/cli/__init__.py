"""Commandes CLI de MovieRate (typer + rich)."""

from movierate.adapters.cli.commands import info, scan

__all__ = ["info", "scan"]
