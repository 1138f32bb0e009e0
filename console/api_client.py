"""Async HTTP client for the file backend API."""

import uuid
from typing import List, Optional
from urllib.parse import quote

import httpx

from common.logging_config import get_logger
from console.config import Config
from console.exceptions import ApiError
from console.messages import Messages
from console.schemas import FileRecord, normalize_listing
from console.state import LocalFile

logger = get_logger(__name__)

LIST_ENDPOINT = "/api/files"
UPLOAD_ENDPOINT = "/api/files/upload"
NO_CACHE_HEADERS = {"Cache-Control": "no-store", "Pragma": "no-cache"}


class FileApiClient:
    """HTTP client for the listing, upload, download and delete endpoints."""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the API client.

        Args:
            config: Configuration instance
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.config = config
        self.messages = Messages(config.get_locale())
        self.session = httpx.AsyncClient(
            base_url=config.get_base_url(),
            timeout=config.get_timeout(),
            transport=transport,
        )
        self.request_id: Optional[str] = None
        logger.info(f"Initialized FileApiClient [base_url={config.get_base_url()}]")

    def _file_path(self, file_id: str, suffix: str = "") -> str:
        return f"{LIST_ENDPOINT}/{quote(file_id, safe='')}{suffix}"

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """
        Make a single HTTP request tagged with a fresh request id.

        Transport errors (connect failures, timeouts) propagate unchanged.
        """
        self.request_id = str(uuid.uuid4())
        headers = dict(kwargs.pop('headers', None) or {})
        headers['X-Request-ID'] = self.request_id

        logger.debug(f"Making request: {method} {endpoint} [request_id={self.request_id}]")
        response = await self.session.request(method, endpoint, headers=headers, **kwargs)
        logger.debug(
            f"Response received: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
        )
        return response

    async def _raise_for_status(self, response: httpx.Response, message: str) -> None:
        """Raise ApiError with the fixed operation message on any non-2xx status."""
        if response.is_success:
            return
        await response.aread()
        body = response.text
        logger.warning(
            f"Request failed: {response.request.method} {response.request.url.path} "
            f"status={response.status_code} [request_id={self.request_id}]"
        )
        logger.debug(f"Server error body: {body[:500]}")
        raise ApiError(response.status_code, message, body=body)

    async def list_files(self) -> List[FileRecord]:
        """
        Fetch the current file collection, bypassing any cache.

        Returns:
            Records in backend order

        Raises:
            ApiError: On non-2xx status
            httpx.HTTPError: On transport failure
            ValueError: On a malformed body
        """
        response = await self._request('GET', LIST_ENDPOINT, headers=NO_CACHE_HEADERS)
        await self._raise_for_status(response, self.messages.get('list_failed'))
        files = normalize_listing(response.json())
        logger.info(f"Listed {len(files)} file(s)")
        return files

    async def upload_file(self, local_file: LocalFile, description: Optional[str] = None) -> None:
        """
        Upload a local file as multipart form data.

        Args:
            local_file: File to send as the ``file`` part
            description: Sent as the ``description`` part only when non-empty

        Raises:
            ApiError: On non-2xx status
            httpx.HTTPError: On transport failure
            OSError: If the local file cannot be read
        """
        data = {'description': description} if description else None
        logger.info(f"Uploading {local_file.name} ({local_file.size} bytes)")
        with open(local_file.path, 'rb') as f:
            files = {'file': (local_file.name, f, local_file.content_type or 'application/octet-stream')}
            response = await self._request('POST', UPLOAD_ENDPOINT, files=files, data=data)
        await self._raise_for_status(response, self.messages.get('upload_failed'))

    async def download_file(self, record: FileRecord) -> bytes:
        """
        Fetch the bytes of a stored file.

        Raises:
            ApiError: On non-2xx status, with a message naming the file
            httpx.HTTPError: On transport failure
        """
        self.request_id = str(uuid.uuid4())
        async with self.session.stream(
            'GET',
            self._file_path(record.id, '/download'),
            headers={'X-Request-ID': self.request_id},
        ) as response:
            await self._raise_for_status(
                response, self.messages.get('download_failed', file_name=record.file_name)
            )
            chunks = [chunk async for chunk in response.aiter_bytes()]
        data = b''.join(chunks)
        logger.info(f"Downloaded {record.file_name} ({len(data)} bytes)")
        return data

    async def delete_file(self, file_id: str) -> None:
        """
        Delete a stored file.

        Raises:
            ApiError: On non-2xx status
            httpx.HTTPError: On transport failure
        """
        response = await self._request('DELETE', self._file_path(file_id))
        await self._raise_for_status(response, self.messages.get('delete_failed'))
        logger.info(f"Deleted file {file_id}")

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.session.aclose()
