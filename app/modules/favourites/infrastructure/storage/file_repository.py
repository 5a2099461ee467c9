# 📄 File: app/modules/favourites/infrastructure/storage/file_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps each user's favourite plants in a small JSON file on disk, which is handy for
# local development and tests where no Redis server is running.
# 🧪 Purpose (Technical Summary):
# File implementation of FavouritesRepository: one UTF-8 file per slot in a directory,
# replaced atomically on write. Blocking I/O runs in a worker thread.
# 🔗 Dependencies:
# asyncio, os, pathlib, app.shared.core.exceptions.StorageError
# 🔄 Connected Modules / Calls From:
# app.main (backend selection), favourites presentation dependencies, tests

import asyncio
import os
import re
from pathlib import Path
from typing import Optional, Union

from app.shared.core.exceptions import StorageError
from app.shared.utils.logging import get_logger

from ...domain.repositories.favourites_repository import FavouritesRepository

logger = get_logger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]")


class FileFavouritesRepository(FavouritesRepository):
    """Favourites slots as ``<directory>/<slot>.json`` files."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_CHARS_RE.sub('_', key)}.json"

    async def read(self, key: str) -> Optional[str]:
        try:
            return await asyncio.to_thread(self._read_sync, self.path_for(key))
        except OSError as e:
            logger.error("Failed to read favourites file", storage_key=key, error=str(e))
            raise StorageError("Could not load favourites", operation="read", storage_key=key)

    async def write(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._write_sync, self.path_for(key), value)
        except OSError as e:
            logger.error("Failed to write favourites file", storage_key=key, error=str(e))
            raise StorageError("Could not save favourites", operation="write", storage_key=key)

    @staticmethod
    def _read_sync(path: Path) -> Optional[str]:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8", errors="replace")

    @staticmethod
    def _write_sync(path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)
