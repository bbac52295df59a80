"""Vault filesystem access.

``BookmarkStore`` is the async filesystem primitive the pipeline writes
through. Paths are vault-relative and use ``/`` separators; every operation
suspends the caller while the I/O runs in a worker thread (``anyio.Path``).

Entries come in two flavours: ``VaultFile`` for regular files and
``VaultFolder`` for everything else occupying a path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import anyio
from loguru import logger


@dataclass(frozen=True)
class VaultFile:
    """A regular file in the vault."""

    path: str  # Vault-relative, "/" separated

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def basename(self) -> str:
        """File name without extension."""
        return PurePosixPath(self.path).stem


@dataclass(frozen=True)
class VaultFolder:
    """A non-file entry (folder, or anything that is not a regular file)."""

    path: str


Entry = VaultFile | VaultFolder


def normalize_path(path: str) -> str:
    """Normalize a vault-relative path.

    Backslashes become ``/``, empty and ``.`` segments are dropped.

    Raises:
        ValueError: If the path is absolute or climbs out of the vault
    """
    raw = path.replace("\\", "/")
    if raw.startswith("/"):
        raise ValueError(f"Path must be relative to the vault: {path}")

    parts = [part for part in raw.split("/") if part not in ("", ".")]
    if ".." in parts:
        raise ValueError(f"Path escapes the vault: {path}")
    return "/".join(parts)


class BookmarkStore:
    """Async access to files inside one vault directory."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser().resolve()

    def __repr__(self) -> str:
        return f"BookmarkStore({str(self.root)!r})"

    def _abs(self, path: str) -> anyio.Path:
        normalized = normalize_path(path)
        return anyio.Path(self.root / normalized) if normalized else anyio.Path(self.root)

    def relative(self, path: Path | str) -> str:
        """Convert a filesystem path inside the vault to a vault path.

        Relative paths are taken to be relative to the vault root already.

        Raises:
            ValueError: If the path lies outside the vault
        """
        p = Path(path).expanduser()
        if not p.is_absolute():
            return normalize_path(p.as_posix())
        try:
            return p.resolve().relative_to(self.root).as_posix()
        except ValueError:
            raise ValueError(f"Path is outside the vault {self.root}: {path}") from None

    async def mkdir(self, path: str) -> None:
        """Create a folder and its parents. Existing folders are fine."""
        await self._abs(path).mkdir(parents=True, exist_ok=True)

    async def exists(self, path: str) -> Entry | None:
        """Look up the entry at path.

        Returns:
            VaultFile for a regular file, VaultFolder for any other entry,
            None if nothing is there
        """
        target = self._abs(path)
        if await target.is_file():
            return VaultFile(normalize_path(path))
        if await target.exists() or await target.is_symlink():
            return VaultFolder(normalize_path(path))
        return None

    async def create(self, path: str, body: str) -> VaultFile:
        """Create a new file with body.

        If a non-file entry occupies path, the file is created next to it
        as ``<stem> 1.md``, ``<stem> 2.md``, ... (first free name).

        Raises:
            OSError: If the file cannot be written, including when a file
                already exists at path
        """
        normalized = normalize_path(path)
        target = self._abs(normalized)

        if await target.exists() and not await target.is_file():
            normalized = await self._free_sibling(normalized)
            target = self._abs(normalized)
            logger.debug(f"[Store] Path occupied by non-file, using {normalized}")

        async with await target.open("x", encoding="utf-8") as f:
            await f.write(body)

        logger.debug(f"[Store] Created {normalized} ({len(body)} chars)")
        return VaultFile(normalized)

    async def shadow_path(self, path: str) -> str:
        """Path a bookmark for path lives at while a non-file entry holds path.

        The first ``<stem> N<suffix>`` sibling that is either missing or
        already a regular file, so repeated bookmarks land on one file.
        """
        pure = PurePosixPath(normalize_path(path))
        seq = 1
        while True:
            candidate = str(pure.with_name(f"{pure.stem} {seq}{pure.suffix}"))
            target = self._abs(candidate)
            if await target.is_file() or not await target.exists():
                return candidate
            seq += 1

    async def _free_sibling(self, path: str) -> str:
        pure = PurePosixPath(path)
        seq = 1
        while True:
            candidate = str(pure.with_name(f"{pure.stem} {seq}{pure.suffix}"))
            if not await self._abs(candidate).exists():
                return candidate
            seq += 1

    async def read(self, file: VaultFile | str) -> str:
        """Read a file's text."""
        path = file.path if isinstance(file, VaultFile) else file
        return await self._abs(path).read_text(encoding="utf-8")
