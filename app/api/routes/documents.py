"""
Documents Routes

Endpoints for:
- The upload form
- Uploading a Word/PowerPoint file and opening it in the editor
- Saving editor text back to the staged file
- Downloading the staged file
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from fastapi.responses import HTMLResponse, Response

from app.api.dependencies import get_document_service
from app.api.models import DocumentModel, DocumentUpdateRequest, UpdateResponse
from app.api.views import render_editor, render_upload_form
from app.features.documents import DocumentNotFoundError, DocumentService
from app.shared.constants import (
    DOWNLOAD_FAILURE_MESSAGE,
    FILE_NOT_FOUND_MESSAGE,
    UPDATE_FAILURE_MESSAGE,
    UPLOAD_FAILURE_MESSAGE,
)
from app.shared.errors import bad_request_error, not_found_error, request_correlation_id

router = APIRouter(prefix="/Document", tags=["Documents"])
logger = logging.getLogger("OfficeDocs.API.Documents")


def _content_disposition(file_name: str) -> str:
    quoted = quote(file_name)
    if quoted == file_name:
        return f'attachment; filename="{file_name}"'
    return f"attachment; filename*=utf-8''{quoted}"


# ============================================================================
# DOCUMENT ENDPOINTS
# ============================================================================

@router.get("", response_class=HTMLResponse, include_in_schema=False)
@router.get("/Index", response_class=HTMLResponse)
def index():
    """Empty upload form."""
    return HTMLResponse(render_upload_form())


@router.post("/UploadDocumant", response_class=HTMLResponse)
def upload_document(
    file: Optional[UploadFile] = File(None, alias="File"),
    service: DocumentService = Depends(get_document_service),
):
    """
    Upload a Word or PowerPoint file (.doc, .docx, .ppt, .pptx).

    The file is staged under the uploads root and its text is shown in the
    editor. A rejected or failed upload re-renders the form with the reason.
    """
    try:
        if file is None:
            document = service.upload(None, None)
        else:
            document = service.upload(file.filename, file.file)

        if not document.is_success:
            return HTMLResponse(render_upload_form(document.message))

        logger.info(f"Uploaded document: {document.file_name} -> {document.file_path}")
        return HTMLResponse(render_editor(DocumentModel.from_stored(document)))

    except Exception as e:
        logger.exception(f"Error processing upload: {e}")
        return HTMLResponse(render_upload_form(UPLOAD_FAILURE_MESSAGE))


@router.get("/DownloadDocument")
def download_document(
    request: Request,
    file_name: str = Query("", alias="fileName"),
    service: DocumentService = Depends(get_document_service),
):
    """Staged file bytes with their content type, or 404 when nothing is staged under that name."""
    try:
        payload = service.download(file_name)
    except DocumentNotFoundError:
        return not_found_error(
            message="Document not found",
            resource_type="document",
            resource_id=file_name,
            correlation_id=request_correlation_id(request),
        )
    except Exception as e:
        logger.exception(f"Error downloading document {file_name}: {e}")
        return bad_request_error(DOWNLOAD_FAILURE_MESSAGE, correlation_id=request_correlation_id(request))

    return Response(
        content=payload.data,
        media_type=payload.content_type,
        headers={"Content-Disposition": _content_disposition(payload.file_name)},
    )


@router.post("/UpdateDocumentContent", response_model=UpdateResponse)
def update_document_content(
    body: DocumentUpdateRequest,
    service: DocumentService = Depends(get_document_service),
):
    """
    Write editor text back to a staged document.

    Word files get a new paragraph appended. PowerPoint files are handled
    according to PRESENTATION_UPDATE_MODE.
    """
    if body.file_path is None:
        logger.warning("Update request without FilePath")
        return UpdateResponse(success=False, message=UPDATE_FAILURE_MESSAGE)

    try:
        message = service.update(body.file_path, body.content or "")
        return UpdateResponse(success=True, message=message)

    except DocumentNotFoundError:
        return UpdateResponse(success=False, message=FILE_NOT_FOUND_MESSAGE)
    except Exception as e:
        logger.exception(f"Error updating document {body.file_path}: {e}")
        return UpdateResponse(success=False, message=UPDATE_FAILURE_MESSAGE)
