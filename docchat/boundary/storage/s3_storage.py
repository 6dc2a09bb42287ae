"""
S3 storage backend.

Sessions are key prefixes under the configured bucket/prefix. S3 has no
directories, so a zero-byte ``.keep`` object marks an empty session.

Dependencies: boto3, botocore, fastapi.concurrency
System role: Storage backend for cloud deployments
"""

import logging
import shutil
import tempfile
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from docchat.boundary.storage.base import SESSION_MARKER, StorageBackend, is_reserved
from docchat.core.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}
_DELETE_BATCH_SIZE = 1000


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES


class S3StorageBackend(StorageBackend):
    """Storage backend on an S3 bucket."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 backend.

        Args:
            bucket: S3 bucket name
            prefix: Key prefix for all sessions ("" or ending with "/")
            region: AWS region for the bucket
            endpoint_url: Optional custom endpoint (MinIO, LocalStack)
            client: Pre-built boto3 S3 client (tests)
        """
        if not bucket:
            raise ValueError("bucket cannot be empty")

        self._bucket = bucket
        self._prefix = prefix
        self._s3_client = client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )
        logger.info(
            f"{__name__}:__init__ - S3 storage root: s3://{bucket}/{prefix}"
        )

    def _session_prefix(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}/"

    def _key(self, session_id: str, filename: str) -> str:
        return f"{self._session_prefix(session_id)}{filename}"

    async def _call(self, operation: str, func: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Run a blocking boto3 call in the threadpool and classify failures.

        Raises:
            StorageError: On any S3 or transport failure
        """
        try:
            return await run_in_threadpool(func, *args, **kwargs)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            raise StorageError(
                "Storage request failed",
                operation=operation,
                details={"bucket": self._bucket, "code": code},
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                "Storage is unreachable",
                operation=operation,
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    def _list_keys_sync(self, prefix: str, delimiter: str | None = None) -> tuple[list[dict], list[str]]:
        paginator = self._s3_client.get_paginator("list_objects_v2")
        params: dict[str, Any] = {"Bucket": self._bucket, "Prefix": prefix}
        if delimiter:
            params["Delimiter"] = delimiter

        contents: list[dict] = []
        common_prefixes: list[str] = []
        for page in paginator.paginate(**params):
            contents.extend(page.get("Contents", []))
            common_prefixes.extend(p["Prefix"] for p in page.get("CommonPrefixes", []))
        return contents, common_prefixes

    def _created_at_sync(self, session_id: str) -> datetime:
        try:
            head = self._s3_client.head_object(
                Bucket=self._bucket, Key=self._key(session_id, SESSION_MARKER)
            )
            return head["LastModified"]
        except ClientError as e:
            if _is_not_found(e):
                return datetime.now(timezone.utc)
            raise

    def _list_sessions_sync(self) -> list[tuple[str, datetime]]:
        _, prefixes = self._list_keys_sync(self._prefix, delimiter="/")
        sessions = []
        for prefix in prefixes:
            session_id = prefix[len(self._prefix):].rstrip("/")
            if session_id:
                sessions.append((session_id, self._created_at_sync(session_id)))
        return sessions

    async def list_sessions(self) -> list[tuple[str, datetime]]:
        # Key order (lexicographic), unlike the local backend's mtime order
        return await self._call("list_sessions", self._list_sessions_sync)

    async def list_files(self, session_id: str) -> set[str]:
        session_prefix = self._session_prefix(session_id)
        contents, _ = await self._call(
            "list_files", self._list_keys_sync, session_prefix, "/"
        )
        files = set()
        for obj in contents:
            name = obj["Key"][len(session_prefix):]
            if not name or is_reserved(name):
                continue
            files.add(name)
        return files

    async def create_session(self, session_id: str) -> None:
        await self._call(
            "create_session",
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=self._key(session_id, SESSION_MARKER),
            Body=b"",
        )

    def _delete_session_sync(self, session_id: str) -> int:
        contents, _ = self._list_keys_sync(self._session_prefix(session_id))
        keys = [{"Key": obj["Key"]} for obj in contents]
        errors: list[dict] = []
        for start in range(0, len(keys), _DELETE_BATCH_SIZE):
            response = self._s3_client.delete_objects(
                Bucket=self._bucket,
                Delete={"Objects": keys[start:start + _DELETE_BATCH_SIZE], "Quiet": True},
            )
            # Quiet mode still reports per-key failures
            errors.extend(response.get("Errors", []))

        if errors:
            raise StorageError(
                "Failed to delete session",
                operation="delete_session",
                details={
                    "session_id": session_id,
                    "failed": [f"{err.get('Key')}: {err.get('Code')}" for err in errors],
                },
            )
        return len(keys)

    async def delete_session(self, session_id: str) -> bool:
        removed = await self._call("delete_session", self._delete_session_sync, session_id)
        logger.info(
            f"{__name__}:delete_session - Removed session {session_id} ({removed} objects)"
        )
        return True

    async def write_file(self, session_id: str, filename: str, data: bytes) -> None:
        await self._call(
            "write_file",
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=self._key(session_id, filename),
            Body=data,
        )

    async def file_exists(self, session_id: str, filename: str) -> bool:
        try:
            await run_in_threadpool(
                self._s3_client.head_object,
                Bucket=self._bucket,
                Key=self._key(session_id, filename),
            )
            return True
        except ClientError as e:
            if _is_not_found(e):
                return False
            raise StorageError(
                "Storage request failed",
                operation="file_exists",
                details={"bucket": self._bucket, "filename": filename},
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                "Storage is unreachable",
                operation="file_exists",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    async def delete_file(self, session_id: str, filename: str) -> None:
        # delete_object succeeds for missing keys, so check first
        if not await self.file_exists(session_id, filename):
            raise NotFoundError(session_id, filename)
        await self._call(
            "delete_file",
            self._s3_client.delete_object,
            Bucket=self._bucket,
            Key=self._key(session_id, filename),
        )

    def _read_file_sync(self, key: str) -> bytes:
        response = self._s3_client.get_object(Bucket=self._bucket, Key=key)
        return response["Body"].read()

    async def read_file(self, session_id: str, filename: str) -> bytes:
        try:
            return await run_in_threadpool(self._read_file_sync, self._key(session_id, filename))
        except ClientError as e:
            if _is_not_found(e):
                raise NotFoundError(session_id, filename) from e
            raise StorageError(
                "Storage request failed",
                operation="read_file",
                details={"bucket": self._bucket, "filename": filename},
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                "Storage is unreachable",
                operation="read_file",
                details={"bucket": self._bucket, "error": str(e)},
            ) from e

    def _download_session_sync(self, session_id: str, target: Path) -> int:
        session_prefix = self._session_prefix(session_id)
        contents, _ = self._list_keys_sync(session_prefix, delimiter="/")
        count = 0
        for obj in contents:
            name = obj["Key"][len(session_prefix):]
            if not name or name == SESSION_MARKER:
                continue
            self._s3_client.download_file(
                Bucket=self._bucket,
                Key=obj["Key"],
                Filename=str(target / name),
            )
            count += 1
        return count

    @asynccontextmanager
    async def materialize(self, session_id: str) -> AsyncIterator[Path]:
        temp_dir = Path(tempfile.mkdtemp(prefix="docchat_"))
        try:
            count = await self._call(
                "materialize", self._download_session_sync, session_id, temp_dir
            )
            logger.info(
                f"{__name__}:materialize - Downloaded {count} objects for session {session_id}"
            )
            yield temp_dir
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)
