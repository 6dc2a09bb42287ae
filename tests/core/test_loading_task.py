"""Document loading by file extension."""

import io

import pytest
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document
from pypdf import PdfReader

from docchat.core.document_processing.tasks import DEFAULT_LOADERS, LoadingTask
from docchat.core.exceptions import LoadError


class PagedLoader(BaseLoader):
    """Loader reporting absolute paths and 0-based pages like PyPDFLoader."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def lazy_load(self):
        for page in range(2):
            yield Document(
                page_content=f"page {page} text",
                metadata={"source": self.file_path, "page": page},
            )


class BrokenLoader(BaseLoader):
    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def lazy_load(self):
        raise ValueError("corrupt file")


def test_default_registry_covers_text_and_pdf() -> None:
    assert {".txt", ".md", ".pdf"} <= set(DEFAULT_LOADERS)
    assert LoadingTask().supported_extensions == set(DEFAULT_LOADERS)


def test_text_files_are_loaded_with_file_name_as_source(tmp_path) -> None:
    (tmp_path / "notes.txt").write_text("plain text notes", encoding="utf-8")
    (tmp_path / "readme.md").write_text("# Title", encoding="utf-8")

    documents, skipped = LoadingTask().load(tmp_path, ["notes.txt", "readme.md"])

    assert skipped == []
    assert [doc.metadata["source"] for doc in documents] == ["notes.txt", "readme.md"]
    assert documents[0].page_content == "plain text notes"


def test_unsupported_files_are_skipped(tmp_path) -> None:
    (tmp_path / "notes.txt").write_text("text", encoding="utf-8")
    (tmp_path / "photo.png").write_bytes(b"\x89PNG")

    documents, skipped = LoadingTask().load(tmp_path, ["notes.txt", "photo.png"])

    assert len(documents) == 1
    assert skipped == ["photo.png"]


def test_extension_match_is_case_insensitive(tmp_path) -> None:
    (tmp_path / "NOTES.TXT").write_text("upper", encoding="utf-8")

    documents, skipped = LoadingTask().load(tmp_path, ["NOTES.TXT"])

    assert len(documents) == 1
    assert skipped == []


def test_pages_become_one_based(tmp_path) -> None:
    (tmp_path / "paper.pdf").write_bytes(b"stub")
    task = LoadingTask({".pdf": PagedLoader})

    documents, _ = task.load(tmp_path, ["paper.pdf"])

    assert [doc.metadata["page"] for doc in documents] == [1, 2]
    assert all(doc.metadata["source"] == "paper.pdf" for doc in documents)


def test_loader_failure_raises_load_error(tmp_path) -> None:
    (tmp_path / "ok.txt").write_text("fine", encoding="utf-8")
    (tmp_path / "bad.pdf").write_bytes(b"broken")
    task = LoadingTask({**DEFAULT_LOADERS, ".pdf": BrokenLoader})

    with pytest.raises(LoadError) as exc_info:
        task.load(tmp_path, ["ok.txt", "bad.pdf"])

    assert exc_info.value.details["filename"] == "bad.pdf"
    assert "bad.pdf" in exc_info.value.message


def test_generated_pdf_is_readable(report_pdf) -> None:
    reader = PdfReader(io.BytesIO(report_pdf))

    assert len(reader.pages) == 2


def test_pdf_pages_are_loaded_one_based(tmp_path, report_pdf) -> None:
    """The registered PDF loader yields one document per page, numbered from 1."""
    (tmp_path / "report.pdf").write_bytes(report_pdf)

    documents, skipped = LoadingTask().load(tmp_path, ["report.pdf"])

    assert skipped == []
    assert [doc.metadata["page"] for doc in documents] == [1, 2]
    assert all(doc.metadata["source"] == "report.pdf" for doc in documents)
    assert "total revenue" in documents[0].page_content


def test_corrupt_pdf_raises_load_error(tmp_path) -> None:
    (tmp_path / "broken.pdf").write_bytes(b"this is not a pdf document")

    with pytest.raises(LoadError) as exc_info:
        LoadingTask().load(tmp_path, ["broken.pdf"])

    assert exc_info.value.details["filename"] == "broken.pdf"
