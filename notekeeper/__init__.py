"""
Notekeeper.

Local note-taking core: persistence gateway, view models, terminal front end.

- core/: Configuration, logging, exceptions, durable store
- models/: SQLAlchemy models
- repositories/: Note repository (sole access to the store)
- schemas/: Pydantic read models
- viewmodels/: List and detail state managers
- cli/: Typer + Rich presentation layer
"""

__version__ = "0.1.0"
