"""Errors raised by the polar store."""

from __future__ import annotations

from pathlib import Path


class PolarError(Exception):
    """Base class for every polar store failure."""


class IdMandatory(PolarError):
    def __init__(self) -> None:
        super().__init__("Id is mandatory")


class AlreadyExists(PolarError):
    def __init__(self, polar_id: str) -> None:
        self.polar_id = polar_id
        super().__init__(f"Polar {polar_id} already exists.")


class NotFound(PolarError):
    def __init__(self, polar_id: str) -> None:
        self.polar_id = polar_id
        super().__init__(f"Polar {polar_id} does not exist.")


class StorageError(PolarError):
    """Underlying filesystem failure; the original error is the ``__cause__``."""


class PolarDecodeError(StorageError):
    """A record file could not be parsed into a Polar."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error reading file {self.path}: {cause}")


class StoreSetupError(PolarError):
    """A store directory could not be prepared. Not recoverable."""
