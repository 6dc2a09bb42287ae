"""
Shared test fixtures and configuration for entire test suite.

Provides: Storage backends (local, moto S3), fake embedding and chat models
Dependencies: pytest, moto, boto3, langchain_core
System role: Test infrastructure and fixture management
"""

import boto3
import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import FakeListChatModel
from moto import mock_aws

from docchat.boundary.storage import LocalStorageBackend, S3StorageBackend
from docchat.configs import IngestionSettings

TEST_BUCKET = "docchat-test"


@pytest.fixture
def local_storage(tmp_path):
    """
    Local storage backend rooted in a temporary directory.

    Returns:
        LocalStorageBackend: Backend with an empty root
    """
    return LocalStorageBackend(tmp_path / "uploads")


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never touches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_client(aws_credentials):
    """
    Mocked S3 client with an empty test bucket.

    Yields:
        S3 client bound to moto's in-memory S3
    """
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=TEST_BUCKET)
        yield client


@pytest.fixture
def s3_storage(s3_client):
    """S3 storage backend under a key prefix of the mocked bucket."""
    return S3StorageBackend(bucket=TEST_BUCKET, prefix="sessions/", client=s3_client)


@pytest.fixture
def embeddings():
    """Deterministic embeddings: equal texts always map to equal vectors."""
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture
def chat_model():
    """Chat model that always answers with the same text."""
    return FakeListChatModel(responses=["Sessions are isolated workspaces [1]."])


@pytest.fixture
def ingestion_settings():
    """Small chunks so short test documents still split."""
    return IngestionSettings(chunk_size=200, chunk_overlap=20)


@pytest.fixture
def long_text():
    """Roughly 3000 characters of prose."""
    sentence = "Each session keeps its own documents and its own vector index. "
    return sentence * 48


def build_pdf(pages: list[str]) -> bytes:
    """
    Build a minimal PDF with one line of Helvetica text per page.

    Args:
        pages: Text of each page (ASCII, no parentheses)

    Returns:
        bytes: PDF document with a valid cross-reference table
    """
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            "<< /Type /Pages /Kids ["
            + " ".join(f"{4 + 2 * i} 0 R" for i in range(len(pages)))
            + f"] /Count {len(pages)} >>"
        ).encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(
            f"<< /Length {len(content)} >>\nstream\n".encode() + content + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def report_pdf() -> bytes:
    """Two-page quarterly report."""
    return build_pdf([
        "Q3 summary: the total revenue was 4.2 million dollars.",
        "Outlook: revenue growth is expected to continue in Q4.",
    ])
