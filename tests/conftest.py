"""Shared pytest fixtures for all tests."""

import json
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from console.config import Config
from console.controller import FileManagerController


def make_record(file_id: str, file_name: str, size: int = 100, **extra) -> dict:
    """Build a FileRecord payload in the backend's wire format."""
    record = {
        'id': file_id,
        'fileName': file_name,
        'size': size,
        'uploadedAt': '2024-05-01T09:30:00Z',
    }
    record.update(extra)
    return record


class FakeBackend:
    """
    In-memory stand-in for the file API, served through httpx.MockTransport.

    ``status_overrides`` maps (method, path) to a status code returned instead
    of the normal response; ``errors`` maps (method, path) to an exception the
    transport raises.
    """

    def __init__(self, files: Optional[List[dict]] = None, shape: str = 'envelope'):
        self.files = list(files or [])
        self.shape = shape
        self.blobs: Dict[str, bytes] = {}
        self.calls: List[Tuple[str, str]] = []
        self.requests: List[httpx.Request] = []
        self.status_overrides: Dict[Tuple[str, str], int] = {}
        self.errors: Dict[Tuple[str, str], Exception] = {}
        self.uploaded: List[bytes] = []
        self._next_id = 1

    def count(self, method: str, path: str) -> int:
        return self.calls.count((method, path))

    def listing_body(self):
        if self.shape == 'bare':
            return self.files
        return {'files': self.files}

    def handler(self, request: httpx.Request) -> httpx.Response:
        key = (request.method, request.url.path)
        self.calls.append(key)
        self.requests.append(request)

        if key in self.errors:
            raise self.errors[key]
        if key in self.status_overrides:
            return httpx.Response(self.status_overrides[key], json={'error': 'backend failure'})

        path = request.url.path
        if key == ('GET', '/api/files'):
            return httpx.Response(200, content=json.dumps(self.listing_body()).encode(),
                                  headers={'Content-Type': 'application/json'})

        if key == ('POST', '/api/files/upload'):
            body = request.content
            self.uploaded.append(body)
            file_id = f'new{self._next_id}'
            self._next_id += 1
            self.files.insert(0, make_record(file_id, 'uploaded.txt', size=len(body)))
            return httpx.Response(201, json={'id': file_id})

        if request.method == 'GET' and path.endswith('/download'):
            file_id = path[len('/api/files/'):-len('/download')]
            if file_id not in self.blobs:
                return httpx.Response(404, json={'error': 'not found'})
            return httpx.Response(200, content=self.blobs[file_id])

        if request.method == 'DELETE' and path.startswith('/api/files/'):
            file_id = path[len('/api/files/'):]
            if not any(f['id'] == file_id for f in self.files):
                return httpx.Response(404, json={'error': 'not found'})
            self.files = [f for f in self.files if f['id'] != file_id]
            return httpx.Response(204)

        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .filedesk directory
    """
    config_dir = tmp_path / '.filedesk'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def download_dir(tmp_path):
    return tmp_path / 'downloads'


@pytest.fixture
def temp_config(temp_config_dir, download_dir):
    """
    Create temporary config instance with downloads going to a temp directory.
    """
    config = Config(temp_config_dir / 'config.json')
    config.data['download_dir'] = str(download_dir)
    return config


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file for testing file uploads.

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path


@pytest.fixture
def backend():
    """Fake backend holding two files, f1 and f2."""
    fake = FakeBackend([
        make_record('f1', 'report.pdf', size=2048, contentType='application/pdf', description='Q3'),
        make_record('f2', 'notes.txt', size=512),
    ])
    fake.blobs['f1'] = b'%PDF-1.4 fake'
    fake.blobs['f2'] = b'hello notes'
    return fake


@pytest.fixture
def controller(temp_config, backend):
    """FileManagerController wired to the fake backend."""
    return FileManagerController.from_config(temp_config, transport=backend.transport())
