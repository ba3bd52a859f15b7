"""Unit tests for LocalFileStorage."""

import pytest

from schoolapp.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest.mark.asyncio
async def test_write_creates_directory_and_file(tmp_path):
    storage = LocalFileStorage(tmp_path / "uploads" / "amka")
    path = await storage.write("abc.pdf", b"%PDF-1.4")

    assert path == str(tmp_path / "uploads" / "amka" / "abc.pdf")
    assert (tmp_path / "uploads" / "amka" / "abc.pdf").read_bytes() == b"%PDF-1.4"


@pytest.mark.asyncio
async def test_write_propagates_os_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file")
    storage = LocalFileStorage(blocker)

    with pytest.raises(OSError):
        await storage.write("abc.pdf", b"data")
