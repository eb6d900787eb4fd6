"""
Document Service - Upload, edit and download staged Office documents.

Features:
- Validate uploads by extension and stage them under the web root
- Extract text for the editor view
- Write edits back (Word: appended paragraph, PowerPoint: sidecar text file
  or appended slide, depending on configuration)
- Serve staged bytes with the matching content type

There is no database: the staged file path is the document's identity.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from app.core.config import Config
from app.features.documents.editor import DocumentEditor
from app.features.documents.extractor import DocumentExtractor
from app.features.documents.storage import (
    DocumentStorage,
    clean_file_name,
    content_type_for,
    download_file_name,
    validate_upload,
)
from app.shared.constants import (
    POWERPOINT_EXTENSIONS,
    UPDATE_SUCCESS_MESSAGE,
    UPLOAD_SUCCESS_MESSAGE,
    WORD_EXTENSIONS,
)

logger = logging.getLogger("OfficeDocs.Documents.Service")


@dataclass
class StoredDocument:
    """A staged document as shown in the editor, or a rejected upload."""
    file_name: str = ""
    file_type: str = ""
    content: str = ""
    file_path: str = ""
    download_name: str = ""
    is_success: bool = False
    message: str = ""


@dataclass
class DownloadPayload:
    data: bytes
    content_type: str
    file_name: str


class DocumentService:
    """
    Service for staged Office documents.

    Holds no per-request state; every call works from the filesystem.
    """

    def __init__(self, config: Config):
        self._config = config
        self._storage = DocumentStorage(
            web_root=config.WEB_ROOT,
            uploads_dir=config.UPLOADS_DIR,
            layout=config.STAGING_LAYOUT,
        )

    @property
    def storage(self) -> DocumentStorage:
        return self._storage

    def upload(self, file_name: Optional[str], source: Optional[BinaryIO]) -> StoredDocument:
        """
        Validate, stage and extract an uploaded document.

        A rejected upload comes back with ``is_success=False`` and the reason
        in ``message``; nothing is written in that case.
        """
        error = validate_upload(file_name)
        if error:
            logger.info(f"Rejected upload '{file_name}': {error}")
            return StoredDocument(file_name=file_name or "", message=error)

        name = clean_file_name(file_name)
        path = self._storage.stage(name, source)
        extraction = DocumentExtractor.extract(path)

        return StoredDocument(
            file_name=name,
            file_type=path.suffix.lower(),
            content=extraction.content,
            file_path=self._storage.relative_path(path),
            download_name=self._storage.upload_key(path),
            is_success=True,
            message=UPLOAD_SUCCESS_MESSAGE,
        )

    def update(self, file_path: str, content: str) -> str:
        """
        Write ``content`` back to the document at ``file_path``.

        Returns the success message.

        Raises:
            DocumentNotFoundError: if the path does not name a staged file.
            Exception: whatever the Word or in-place PowerPoint edit raised.
        """
        path = self._storage.resolve_web_path(file_path)
        ext = path.suffix.lower()

        if ext in WORD_EXTENSIONS:
            DocumentEditor.append_word_paragraph(path, content)
        elif ext in POWERPOINT_EXTENSIONS:
            if self._config.PRESENTATION_UPDATE_MODE == "in_place":
                DocumentEditor.append_presentation_slide(path, content)
            else:
                DocumentEditor.write_presentation_sidecar(path, content)
        else:
            logger.warning(f"Update ignored for unsupported file type '{ext}': {path}")

        return UPDATE_SUCCESS_MESSAGE

    def download(self, file_name: str) -> DownloadPayload:
        """
        Read a staged file for download.

        Raises:
            DocumentNotFoundError: if ``file_name`` does not resolve to a file
                under the uploads root.
        """
        path: Path = self._storage.resolve_upload(file_name)
        data = path.read_bytes()
        logger.info(f"Serving {len(data)} bytes for {file_name}")

        return DownloadPayload(
            data=data,
            content_type=content_type_for(path.name),
            file_name=download_file_name(path.name, self._config.DOWNLOAD_NAME_RULE),
        )
