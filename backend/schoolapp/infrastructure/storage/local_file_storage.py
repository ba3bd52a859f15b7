"""Local filesystem storage for uploaded attachments.

Storage layout:
    <upload_dir>/<saved_name>        one file per attachment, name chosen by the caller

Writes are not transactional: a file written here stays on disk even if the
database write that should reference it is rolled back.
"""

import logging
from pathlib import Path

from schoolapp.application.interfaces import AttachmentStorage

logger = logging.getLogger(__name__)


class LocalFileStorage(AttachmentStorage):
    """Infrastructure adapter for local attachment storage."""

    def __init__(self, upload_dir: str | Path):
        self._upload_dir = Path(upload_dir)

    async def write(self, saved_name: str, content: bytes) -> str:
        """Write ``content`` to ``<upload_dir>/<saved_name>``.

        The directory is created on demand. Any ``OSError`` propagates.
        """
        dest_path = self._upload_dir / saved_name
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_bytes(content)

        logger.info("Stored attachment: %s (%d bytes)", dest_path, len(content))
        return str(dest_path)
