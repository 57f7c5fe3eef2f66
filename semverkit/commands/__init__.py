"""Subcommands of the semverkit CLI, registered in :mod:`semverkit.cli`."""
