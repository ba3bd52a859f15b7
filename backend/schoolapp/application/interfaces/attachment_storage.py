"""Port for the raw-byte attachment sink."""

from abc import ABC, abstractmethod


class AttachmentStorage(ABC):
    """Writes uploaded attachment bytes somewhere durable."""

    @abstractmethod
    async def write(self, saved_name: str, content: bytes) -> str:
        """Write ``content`` under ``saved_name`` and return the stored path.

        Creates the target directory when missing. Raises ``OSError`` on any
        write failure.
        """
        ...
