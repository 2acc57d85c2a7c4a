"""Filesystem-backed polar store with an active / archived lifecycle."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import TYPE_CHECKING

from polar_utils.log import polar_log

from .codec import EXTENSION, file_name, read_polar, write_polar
from .errors import (
    AlreadyExists,
    IdMandatory,
    NotFound,
    PolarDecodeError,
    StorageError,
    StoreSetupError,
)
from .models import Polar, derive_id

if TYPE_CHECKING:
    from polar_config import PolarsConfig


class PolarStore:
    """One YAML file per polar, kept in either the active or archived directory.

    The filename stem is the polar's id. An id lives in at most one of the two
    directories; operations check this before writing, nothing else does. No
    locking is done, the filesystem is the only source of truth.
    """

    def __init__(self, polars_dir: str | Path, archived_dir: str | Path) -> None:
        self.polars_dir = Path(polars_dir)
        self.archived_dir = Path(archived_dir)
        self._create_dir(self.polars_dir)
        self._create_dir(self.archived_dir)
        polar_log(f"Polar store opened: active={self.polars_dir} archived={self.archived_dir}")

    @classmethod
    def from_config(cls, config: PolarsConfig) -> PolarStore:
        return cls(config.polars_dir, config.archived_dir)

    @staticmethod
    def _create_dir(directory: Path) -> None:
        if not directory.exists():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreSetupError(f"Error creating dir {directory} : {e}") from e
        elif not directory.is_dir():
            raise StoreSetupError(f"{directory} is not a directory")

    # -- Paths --

    def active_path(self, polar_id: str) -> Path:
        return self.polars_dir / file_name(polar_id)

    def archived_path(self, polar_id: str) -> Path:
        return self.archived_dir / file_name(polar_id)

    # -- Queries --

    def list(self, archived: bool | None = None) -> list[Polar]:
        """All polars of one directory: archived if *archived* is True, else active.

        Unreadable or undecodable entries are logged and skipped.
        """
        is_archived = archived is True
        directory = self.archived_dir if is_archived else self.polars_dir
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            polar_log(f"Error listing dir {directory} : {e}")
            raise StorageError(f"Error listing dir {directory}") from e

        polars: list[Polar] = []
        for entry in entries:
            try:
                mode = entry.lstat().st_mode
            except OSError as e:
                polar_log(f"Couldn't get metadata for {entry} : {e}")
                continue
            if not stat.S_ISREG(mode) or entry.suffix != f".{EXTENSION}":
                continue
            try:
                polar = read_polar(entry)
            except (PolarDecodeError, OSError) as e:
                polar_log(f"Error reading file {entry} : {e}")
                continue
            if polar is None:
                polar_log(f"Error reading file {entry} : empty document")
                continue
            polar.id = entry.stem
            polar.archived = is_archived
            polars.append(polar)
        return polars

    def get(self, polar_id: str) -> Polar | None:
        """Look up by primary key, active directory first."""
        path = self.active_path(polar_id)
        archived = False
        if not path.exists():
            path = self.archived_path(polar_id)
            archived = True
            if not path.exists():
                return None

        try:
            polar = read_polar(path)
        except OSError as e:
            polar_log(f"Error reading file {path} : {e}")
            raise StorageError(f"Error reading file {path}") from e
        if polar is None:
            return None
        polar.id = polar_id
        polar.archived = archived
        return polar

    def find_by_polar_id(self, polar_id: int) -> Polar | None:
        """First polar whose secondary id matches, active before archived."""
        for archived in (False, True):
            for polar in self.list(archived):
                if polar.polar_id == polar_id:
                    return polar
        return None

    # -- Mutations --

    def create(self, polar: Polar) -> Polar:
        """Write a new active polar.

        The id comes from ``polar.id`` or, failing that, the last segment of
        the label. Only the active directory is checked for a clash.
        """
        polar_id = polar.id or derive_id(polar.label)
        if not polar_id:
            raise IdMandatory()
        path = self.active_path(polar_id)
        if path.exists():
            raise AlreadyExists(polar_id)
        stored = polar.model_copy(update={"id": polar_id, "archived": False})
        self._save(path, stored)
        return stored

    def update(self, polar_id: str, polar: Polar) -> Polar:
        """Overwrite an active polar, renaming the file if the id changed.

        A rename does not check the new id; an active polar already there is
        overwritten.
        """
        path = self.active_path(polar_id)
        if not path.exists():
            raise NotFound(polar_id)

        new_id = polar.id or polar_id
        stored = polar.model_copy(update={"id": new_id, "archived": False})
        if new_id == polar_id:
            self._save(path, stored)
            return stored

        self._save(self.active_path(new_id), stored)
        self._remove(path)
        return stored

    def delete(self, polar_id: str) -> None:
        """Remove a polar from the active directory, else from the archive."""
        path = self.active_path(polar_id)
        if not path.exists():
            path = self.archived_path(polar_id)
            if not path.exists():
                raise NotFound(polar_id)
        self._remove(path)

    def archive(self, polar_id: str) -> None:
        path = self.active_path(polar_id)
        if not path.exists():
            raise NotFound(polar_id)
        self._move(path, self.archived_path(polar_id))

    def restore(self, polar_id: str) -> None:
        archived = self.archived_path(polar_id)
        if not archived.exists():
            raise NotFound(polar_id)
        path = self.active_path(polar_id)
        if path.exists():
            raise AlreadyExists(polar_id)
        self._move(archived, path)

    # -- Filesystem helpers --

    @staticmethod
    def _save(path: Path, polar: Polar) -> None:
        try:
            write_polar(path, polar)
        except OSError as e:
            polar_log(f"Error saving polar {path} : {e}")
            raise StorageError(f"Error saving polar {path}") from e

    @staticmethod
    def _remove(path: Path) -> None:
        try:
            path.unlink()
        except OSError as e:
            polar_log(f"Error removing file {path} : {e}")
            raise StorageError(f"Error removing file {path}") from e

    @staticmethod
    def _move(source: Path, target: Path) -> None:
        try:
            source.replace(target)
        except OSError as e:
            polar_log(f"Error moving file {source} to {target} : {e}")
            raise StorageError(f"Error moving file {source} to {target}") from e
