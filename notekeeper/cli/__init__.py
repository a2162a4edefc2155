"""
Terminal Presentation Layer.

Typer commands and an interactive shell that render view-model state
with Rich. Nothing here talks to the repository except to construct it.
"""
