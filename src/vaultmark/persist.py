"""Persisting records into the bookmark folder."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from vaultmark.errors import PersistError
from vaultmark.naming import derive_filename
from vaultmark.record import MarkdownRecord
from vaultmark.store import BookmarkStore, VaultFile, VaultFolder


@dataclass(frozen=True)
class MarkdownFile:
    """Handle to a persisted bookmark.

    Attributes:
        title: Record title the bookmark was created for
        file: The file in the vault
        created: False when an existing bookmark was reused
    """

    title: str
    file: VaultFile
    created: bool = True


async def persist_record(
    store: BookmarkStore,
    bookmark_folder: str,
    record: MarkdownRecord,
) -> MarkdownFile:
    """Write a record to the bookmark folder unless it is already there.

    Steps run strictly in order: create the folder, derive the path, look
    up the path, then reuse the existing file or create a new one with the
    record content as body. While a non-file entry holds the path, the
    bookmark lives at the first free or file-holding ``<stem> N.md``
    sibling, which is reused on later runs.

    Args:
        store: Vault to write into
        bookmark_folder: Vault-relative folder for bookmarks
        record: Record to persist

    Returns:
        MarkdownFile for the reused or created file

    Raises:
        PersistError: If any filesystem step fails
    """
    path = f"{bookmark_folder}/{derive_filename(record)}"
    try:
        await store.mkdir(bookmark_folder)

        existing = await store.exists(path)
        if isinstance(existing, VaultFolder):
            path = await store.shadow_path(path)
            existing = await store.exists(path)

        if isinstance(existing, VaultFile):
            logger.debug(f"[Persist] Already bookmarked: {existing.path}")
            return MarkdownFile(title=record.title, file=existing, created=False)

        file = await store.create(path, record.content)
    except (OSError, ValueError) as e:
        raise PersistError(str(e), path=path) from e

    logger.info(f"Saved bookmark: {file.path}")
    return MarkdownFile(title=record.title, file=file)
