"""File management through FileService and UploadBatch."""

from unittest.mock import MagicMock

import pytest

from docchat.application.services import FileService, UploadBatch
from docchat.core.document_processing import IngestionPipeline
from docchat.core.exceptions import (
    FileTooLargeError,
    InvalidNameError,
    NoIndexError,
    NotFoundError,
    StorageError,
    TooManyFilesError,
)
from docchat.core.rag_query import QueryEngine
from docchat.models.document import UploadedFile


def _file(name: str, size: int = 10) -> UploadedFile:
    return UploadedFile(name=name, content=b"x" * size)


@pytest.fixture
def file_service(local_storage):
    return FileService(local_storage, max_files=3, max_file_size=100)


class TestUploadBatch:
    """Pending batch limits."""

    def test_add_within_limits(self) -> None:
        batch = UploadBatch(max_files=3, max_file_size=100)

        skipped = batch.add([_file("a.txt"), _file("b.txt")])

        assert skipped == []
        assert [f.name for f in batch.files] == ["a.txt", "b.txt"]

    def test_too_many_files_adds_nothing(self) -> None:
        batch = UploadBatch(max_files=3, max_file_size=100)
        batch.add([_file("a.txt"), _file("b.txt")])

        with pytest.raises(TooManyFilesError) as exc_info:
            batch.add([_file("c.txt"), _file("d.txt")])

        assert len(batch) == 2
        assert exc_info.value.details == {"requested": 4, "limit": 3}

    def test_oversize_files_are_skipped(self) -> None:
        batch = UploadBatch(max_files=3, max_file_size=100)

        skipped = batch.add([_file("small.txt", 100), _file("big.pdf", 101)])

        assert skipped == ["big.pdf"]
        assert [f.name for f in batch.files] == ["small.txt"]

    def test_existing_files_are_flagged_as_overwrites(self) -> None:
        batch = UploadBatch(existing_files={"a.txt"})

        batch.add([_file("a.txt"), _file("b.txt")])

        assert {f.name: f.overwrites for f in batch.files} == {"a.txt": True, "b.txt": False}

    def test_remove_and_clear(self) -> None:
        batch = UploadBatch()
        batch.add([_file("a.txt"), _file("b.txt")])

        batch.remove("a.txt")
        assert [f.name for f in batch.files] == ["b.txt"]

        batch.clear()
        assert len(batch) == 0

    def test_reserved_name_adds_nothing(self) -> None:
        batch = UploadBatch()

        with pytest.raises(InvalidNameError):
            batch.add([_file("a.txt"), _file("index.faiss")])

        assert len(batch) == 0

    def test_limit_ignores_stored_files(self) -> None:
        """Only pending files count toward the limit."""
        batch = UploadBatch(max_files=2, existing_files={"x.txt", "y.txt", "z.txt"})

        batch.add([_file("a.txt"), _file("b.txt")])

        assert len(batch) == 2


@pytest.mark.asyncio
async def test_upload_then_list(file_service) -> None:
    await file_service.upload("s1", _file("notes.txt"))

    assert await file_service.list_files("s1") == {"notes.txt"}


@pytest.mark.asyncio
async def test_list_files_of_missing_session_is_empty(file_service) -> None:
    assert await file_service.list_files("missing") == set()


@pytest.mark.asyncio
async def test_upload_too_large_writes_nothing(file_service, local_storage) -> None:
    with pytest.raises(FileTooLargeError):
        await file_service.upload("s1", _file("big.pdf", 101))

    assert await local_storage.list_files("s1") == set()


@pytest.mark.asyncio
async def test_upload_rejects_unsafe_file_name(file_service) -> None:
    with pytest.raises(InvalidNameError):
        await file_service.upload("s1", _file("../escape.txt"))


@pytest.mark.asyncio
async def test_upload_batch_reports_progress(file_service) -> None:
    batch = await file_service.new_batch("s1")
    batch.add([_file("a.txt"), _file("b.txt"), _file("c.txt")])
    progress: list[tuple[int, int]] = []

    report = await file_service.upload_batch(
        "s1", batch, on_progress=lambda done, total: progress.append((done, total))
    )

    assert report.uploaded == ["a.txt", "b.txt", "c.txt"]
    assert report.failed == []
    assert progress == [(1, 3), (2, 3), (3, 3)]
    assert len(batch) == 0


@pytest.mark.asyncio
async def test_upload_batch_isolates_failures(local_storage, monkeypatch) -> None:
    """One failed file does not stop the rest."""
    service = FileService(local_storage)
    original_write = local_storage.write_file

    async def flaky_write(session_id: str, filename: str, data: bytes) -> None:
        if filename == "b.txt":
            raise StorageError("Failed to write file", operation="write_file")
        await original_write(session_id, filename, data)

    monkeypatch.setattr(local_storage, "write_file", flaky_write)
    batch = await service.new_batch("s1")
    batch.add([_file("a.txt"), _file("b.txt"), _file("c.txt")])

    report = await service.upload_batch("s1", batch)

    assert report.uploaded == ["a.txt", "c.txt"]
    assert [(f.name, f.error) for f in report.failed] == [("b.txt", "Failed to write file")]
    assert await local_storage.list_files("s1") == {"a.txt", "c.txt"}


@pytest.mark.asyncio
async def test_new_batch_knows_existing_files(file_service) -> None:
    await file_service.upload("s1", _file("a.txt"))

    batch = await file_service.new_batch("s1")
    batch.add([_file("a.txt")])

    assert batch.files[0].overwrites is True


@pytest.mark.asyncio
async def test_delete_file(file_service) -> None:
    await file_service.upload("s1", _file("a.txt"))

    await file_service.delete_file("s1", "a.txt")

    assert await file_service.list_files("s1") == set()


@pytest.mark.asyncio
async def test_delete_missing_file_raises_not_found(file_service) -> None:
    with pytest.raises(NotFoundError):
        await file_service.delete_file("s1", "absent.txt")


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["data.json", "index.faiss", "index.pkl", ".keep"])
async def test_upload_rejects_reserved_names(file_service, local_storage, name: str) -> None:
    """Reserved names would be hidden from listings or replace index artifacts."""
    with pytest.raises(InvalidNameError):
        await file_service.upload("s1", _file(name))

    assert not await local_storage.file_exists("s1", name)


@pytest.mark.asyncio
async def test_uploads_cannot_replace_session_index(
    local_storage, embeddings, ingestion_settings
) -> None:
    """Index artifacts copied from another session are refused."""
    # Arrange: a valid index in another session
    pipeline = IngestionPipeline(local_storage, embeddings, ingestion_settings)
    await local_storage.write_file("donor", "notes.txt", b"Donor content.")
    await pipeline.process("donor")
    faiss_bytes = await local_storage.read_file("donor", "index.faiss")
    service = FileService(local_storage)

    # Act
    for name, content in (("index.faiss", faiss_bytes), ("index.pkl", b"not a docstore")):
        with pytest.raises(InvalidNameError):
            await service.upload("s1", UploadedFile(name=name, content=content))

    # Assert
    assert not await local_storage.file_exists("s1", "index.pkl")
    with pytest.raises(NoIndexError):
        await QueryEngine(local_storage, embeddings, MagicMock()).ask("s1", "Anything?")


@pytest.mark.asyncio
async def test_delete_rejects_index_artifacts(file_service, local_storage) -> None:
    await local_storage.write_file("s1", "index.faiss", b"vectors")

    with pytest.raises(InvalidNameError):
        await file_service.delete_file("s1", "index.faiss")

    assert await local_storage.file_exists("s1", "index.faiss")
