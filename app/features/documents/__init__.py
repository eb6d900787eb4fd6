"""
Documents Feature - Office document round trip

Stages uploaded Word and PowerPoint files under the web root with:
- Plain-text extraction for the editor view
- Text edits written back to the staged file (or a sidecar text file)
- Downloads of the staged bytes with the matching content type
"""

from app.features.documents.editor import DocumentEditor
from app.features.documents.exceptions import (
    DocumentNotFoundError,
    DocumentServiceError,
    DocumentUpdateError,
)
from app.features.documents.extractor import DocumentExtractor, ExtractionResult
from app.features.documents.service import DocumentService, DownloadPayload, StoredDocument

__all__ = [
    "DocumentEditor",
    "DocumentExtractor",
    "DocumentNotFoundError",
    "DocumentService",
    "DocumentServiceError",
    "DocumentUpdateError",
    "DownloadPayload",
    "ExtractionResult",
    "StoredDocument",
]
