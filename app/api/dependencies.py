from functools import lru_cache

from app.core.config import settings
from app.features.documents import DocumentService


@lru_cache(maxsize=1)
def get_document_service() -> DocumentService:
    """Provide a singleton document service for request handlers."""
    return DocumentService(settings)
