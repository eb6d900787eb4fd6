from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.features.documents import StoredDocument


# =========================================================================
# DOCUMENT MODELS
# =========================================================================

class DocumentModel(BaseModel):
    """Editor view model; serialized with the field names the front end uses."""
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(default="", alias="FileName")
    file_type: str = Field(default="", alias="FileType")
    content: str = Field(default="", alias="Content")
    file_path: str = Field(default="", alias="FilePath")
    download_name: str = Field(default="", alias="DownloadName")
    is_success: bool = Field(default=False, alias="IsSuccess")
    message: str = Field(default="", alias="Message")

    @classmethod
    def from_stored(cls, document: StoredDocument) -> "DocumentModel":
        return cls(
            file_name=document.file_name,
            file_type=document.file_type,
            content=document.content,
            file_path=document.file_path,
            download_name=document.download_name,
            is_success=document.is_success,
            message=document.message,
        )


class DocumentUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: Optional[str] = Field(default=None, alias="FilePath", description="Staged file path relative to the web root")
    content: Optional[str] = Field(default=None, alias="Content", description="Text to write back")


class UpdateResponse(BaseModel):
    success: bool
    message: str
