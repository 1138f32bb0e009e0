"""Unit tests for FileApiClient."""

import httpx
import pytest

from conftest import make_record
from console.api_client import FileApiClient
from console.exceptions import ApiError
from console.schemas import FileRecord
from console.state import LocalFile


@pytest.fixture
def mock_transport_success():
    """Mock transport that returns successful responses."""
    def handler(request):
        if request.url.path == '/api/files' and request.method == 'GET':
            return httpx.Response(200, json={'files': [make_record('file123', 'test.txt')]})
        elif request.url.path == '/api/files/upload' and request.method == 'POST':
            return httpx.Response(201, json={'id': 'file456'})
        elif request.url.path == '/api/files/file123/download':
            return httpx.Response(200, content=b'x' * 20000)
        elif request.url.path == '/api/files/file123' and request.method == 'DELETE':
            return httpx.Response(200, json={'deleted': True})

        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def client_with_mock(temp_config, mock_transport_success):
    """Create FileApiClient with mocked HTTP transport."""
    return FileApiClient(temp_config, transport=mock_transport_success)


def error_client(temp_config, status_code, body=None):
    def handler(request):
        return httpx.Response(status_code, json=body or {'error': 'boom', 'stack': 'secret internals'})

    return FileApiClient(temp_config, transport=httpx.MockTransport(handler))


def test_client_uses_config_base_url(temp_config):
    client = FileApiClient(temp_config)

    assert str(client.session.base_url).rstrip('/') == 'http://localhost:3000'
    assert client.session.timeout.read == 30


@pytest.mark.asyncio
async def test_list_files_success(client_with_mock):
    """Test successful file listing decodes records."""
    files = await client_with_mock.list_files()

    assert len(files) == 1
    assert isinstance(files[0], FileRecord)
    assert files[0].file_name == 'test.txt'


@pytest.mark.asyncio
async def test_list_files_error_hides_server_body(temp_config):
    """Non-2xx maps to the fixed message; the body is kept for diagnostics only."""
    client = error_client(temp_config, 500)

    with pytest.raises(ApiError) as exc_info:
        await client.list_files()

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == client.messages.get('list_failed')
    assert 'secret internals' not in exc_info.value.message
    assert 'secret internals' in exc_info.value.body


@pytest.mark.asyncio
async def test_upload_file_success(client_with_mock, sample_file):
    """Test successful upload returns without raising."""
    await client_with_mock.upload_file(LocalFile.from_path(sample_file), 'notes')


@pytest.mark.asyncio
async def test_upload_file_defaults_content_type(temp_config, tmp_path):
    """Files with no guessable type are sent as application/octet-stream."""
    captured = []

    def handler(request):
        captured.append(request.content)
        return httpx.Response(200)

    path = tmp_path / 'blob'
    path.write_bytes(b'\x00\x01')
    client = FileApiClient(temp_config, transport=httpx.MockTransport(handler))

    await client.upload_file(LocalFile.from_path(path))

    assert b'Content-Type: application/octet-stream' in captured[0]


@pytest.mark.asyncio
async def test_upload_file_error(temp_config, sample_file):
    client = error_client(temp_config, 413)

    with pytest.raises(ApiError) as exc_info:
        await client.upload_file(LocalFile.from_path(sample_file))

    assert exc_info.value.message == client.messages.get('upload_failed')


@pytest.mark.asyncio
async def test_download_file_reads_whole_body(client_with_mock):
    record = FileRecord(id='file123', fileName='test.txt', size=20000, uploadedAt='2024-01-01T00:00:00Z')

    data = await client_with_mock.download_file(record)

    assert data == b'x' * 20000


@pytest.mark.asyncio
async def test_download_file_error_names_file(temp_config):
    client = error_client(temp_config, 404)
    record = FileRecord(id='missing', fileName='report.pdf', size=1, uploadedAt='2024-01-01T00:00:00Z')

    with pytest.raises(ApiError) as exc_info:
        await client.download_file(record)

    assert 'report.pdf' in exc_info.value.message


@pytest.mark.asyncio
async def test_delete_file_success(client_with_mock):
    await client_with_mock.delete_file('file123')


@pytest.mark.asyncio
async def test_delete_file_not_found(client_with_mock):
    with pytest.raises(ApiError) as exc_info:
        await client_with_mock.delete_file('nope')

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_no_retry_on_server_error(temp_config):
    """Each operation makes exactly one request."""
    call_count = 0

    def failing_handler(request):
        nonlocal call_count
        call_count += 1
        return httpx.Response(503)

    client = FileApiClient(temp_config, transport=httpx.MockTransport(failing_handler))

    with pytest.raises(ApiError):
        await client.list_files()

    assert call_count == 1


@pytest.mark.asyncio
async def test_connection_error_propagates(temp_config):
    """Transport failures are left for the controller to report."""
    def failing_handler(request):
        raise httpx.ConnectError("Connection refused")

    client = FileApiClient(temp_config, transport=httpx.MockTransport(failing_handler))

    with pytest.raises(httpx.ConnectError):
        await client.list_files()


@pytest.mark.asyncio
async def test_request_id_header(temp_config):
    seen = []

    def handler(request):
        seen.append(request.headers.get('X-Request-ID'))
        return httpx.Response(200, json=[])

    client = FileApiClient(temp_config, transport=httpx.MockTransport(handler))
    await client.list_files()
    await client.list_files()

    assert all(seen)
    assert seen[0] != seen[1]
    assert client.request_id == seen[1]


@pytest.mark.asyncio
async def test_close_session(client_with_mock):
    """Test closing HTTP session."""
    await client_with_mock.close()
    assert client_with_mock.session.is_closed
