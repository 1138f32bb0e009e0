"""File manager controller: session state plus the list/upload/download/delete operations."""

from pathlib import Path
from typing import List, Optional, Union

import httpx

from common.logging_config import get_logger
from console.api_client import FileApiClient
from console.config import Config
from console.exceptions import FileDeskError, ValidationError
from console.messages import Messages
from console.object_urls import FileSaver, ObjectUrlStore
from console.schemas import FileRecord
from console.state import FileManagerState, LocalFile

logger = get_logger(__name__)

FileInput = Union[LocalFile, str, Path]


class FileManagerController:
    """
    Owns the console's FileManagerState and runs operations against the backend.

    Each operation clears the previous error when it starts, records any failure
    in ``state.error_message`` instead of raising, and always resets its
    in-flight flag when it settles. Operations may overlap; listings carry a
    generation number so an older response never overwrites a newer one.
    """

    def __init__(
        self,
        client: FileApiClient,
        store: ObjectUrlStore,
        saver: FileSaver,
        messages: Optional[Messages] = None,
    ):
        self.client = client
        self.store = store
        self.saver = saver
        self.messages = messages or Messages()
        self.state = FileManagerState()
        self._list_generation = 0
        self._applied_generation = 0

    @classmethod
    def from_config(cls, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None) -> 'FileManagerController':
        """Build a controller with a real HTTP client, object URL store and saver."""
        store = ObjectUrlStore()
        return cls(
            client=FileApiClient(config, transport=transport),
            store=store,
            saver=FileSaver(store, config.get_download_dir()),
            messages=Messages(config.get_locale()),
        )

    def _record_error(self, exc: Exception, fallback_key: str, operation: str) -> None:
        """Log a failure and expose it as the current error message."""
        if isinstance(exc, FileDeskError):
            logger.warning(f"{operation} failed: {exc.message}")
            message = exc.message
        elif isinstance(exc, ValueError):
            logger.error(f"{operation} failed to decode response: {exc}", exc_info=True)
            message = str(exc) or self.messages.get(fallback_key)
        else:
            logger.error(f"{operation} failed: {exc!r}", exc_info=True)
            message = str(exc) or self.messages.get(fallback_key)
        self.state.error_message = message

    def _load_local_file(self, file: FileInput) -> LocalFile:
        if isinstance(file, LocalFile):
            return file
        try:
            return LocalFile.from_path(file)
        except FileNotFoundError:
            raise ValidationError(self.messages.get('file_not_found', path=file))
        except IsADirectoryError:
            raise ValidationError(self.messages.get('not_a_file', path=file))

    async def mount(self) -> bool:
        """Initial listing when the console starts."""
        logger.info("Mounting file manager")
        return await self.list()

    async def list(self) -> bool:
        """
        Replace the file collection with a fresh listing from the backend.

        Returns:
            True if the listing succeeded
        """
        self._list_generation += 1
        generation = self._list_generation

        self.state.is_loading = True
        self.state.error_message = None
        try:
            files = await self.client.list_files()
            if generation < self._applied_generation:
                logger.debug(
                    f"Discarding stale listing [generation={generation}, applied={self._applied_generation}]"
                )
                return True
            self._applied_generation = generation
            self.state.files = files
            return True
        except Exception as e:
            self._record_error(e, 'list_unexpected', 'List')
            return False
        finally:
            self.state.is_loading = False

    async def refresh(self) -> bool:
        """Manual refresh action."""
        return await self.list()

    def select_file(self, file: Optional[FileInput]) -> bool:
        """
        Choose the local file for the next upload; ``None`` clears the selection.

        A path that cannot be read sets the error message and keeps the
        previous selection.
        """
        if file is None:
            self.state.selected_file = None
            return True
        try:
            self.state.selected_file = self._load_local_file(file)
        except ValidationError as e:
            self.state.error_message = e.message
            return False
        logger.debug(f"Selected {self.state.selected_file.name} for upload")
        return True

    def set_description(self, text: str) -> None:
        self.state.description = text or ""

    async def upload(self, file: Optional[FileInput] = None, description: Optional[str] = None) -> bool:
        """
        Upload the given or pending file, then re-list on success.

        Explicit arguments replace the pending selection and description so a
        failed upload can be retried with ``upload()``.

        Returns:
            True if the backend accepted the upload
        """
        if file is not None and not self.select_file(file):
            return False
        if description is not None:
            self.set_description(description)

        local_file = self.state.selected_file
        if local_file is None:
            message = self.messages.get('upload_no_file')
            logger.warning("Upload requested with no file selected")
            self.state.error_message = message
            return False

        self.state.is_uploading = True
        self.state.error_message = None
        try:
            await self.client.upload_file(local_file, self.state.description or None)
            logger.info(f"Uploaded {local_file.name}")
            self.state.selected_file = None
            self.state.description = ""
            await self.list()
            return True
        except Exception as e:
            self._record_error(e, 'upload_unexpected', 'Upload')
            return False
        finally:
            self.state.is_uploading = False

    async def download(self, record: FileRecord, destination: Optional[Path] = None) -> Optional[Path]:
        """
        Fetch a file's bytes and save them locally under its file name.

        The temporary object URL is revoked whether or not saving succeeds.

        Returns:
            Path of the saved file, or None on failure
        """
        self.state.active_download_id = record.id
        self.state.error_message = None
        try:
            data = await self.client.download_file(record)
            url = self.store.create(data)
            try:
                return self.saver.save(url, record.file_name, destination)
            finally:
                self.store.revoke(url)
        except Exception as e:
            self._record_error(e, 'download_unexpected', f"Download of {record.file_name}")
            return None
        finally:
            self.state.active_download_id = None

    async def delete(self, file_id: str) -> bool:
        """
        Delete a file and drop it from the local listing without re-fetching.

        Returns:
            True if the backend acknowledged the deletion
        """
        self.state.deleting_id = file_id
        self.state.error_message = None
        try:
            await self.client.delete_file(file_id)
            self.state.files = [record for record in self.state.files if record.id != file_id]
            return True
        except Exception as e:
            self._record_error(e, 'delete_unexpected', f"Delete of {file_id}")
            return False
        finally:
            self.state.deleting_id = None

    def find(self, ref: str) -> Optional[FileRecord]:
        """
        Resolve a record in the current listing by id, unique id prefix or unique file name.
        """
        if not ref:
            return None
        files: List[FileRecord] = self.state.files
        for record in files:
            if record.id == ref:
                return record

        by_prefix = [record for record in files if record.id.startswith(ref)]
        if len(by_prefix) == 1:
            return by_prefix[0]

        by_name = [record for record in files if record.file_name == ref]
        if len(by_name) == 1:
            return by_name[0]
        return None

    async def close(self) -> None:
        """Release the HTTP session and any outstanding object URLs."""
        await self.client.close()
        self.store.close()
