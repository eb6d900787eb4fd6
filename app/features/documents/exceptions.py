class DocumentServiceError(Exception):
    """Base exception for document service errors."""


class DocumentNotFoundError(DocumentServiceError):
    """Raised when a staged document cannot be resolved on disk."""


class DocumentUpdateError(DocumentServiceError):
    """Raised when a document cannot be edited."""
