"""
Staging of uploaded documents under the web root.

Layout of the uploads root depends on the configured staging layout:

    nested: <web_root>/uploads/<name>/<name>
    flat:   <web_root>/uploads/<name>

The staged path is the only identity a document has; uploading a file with
the same name again overwrites it.
"""

import logging
import shutil
from pathlib import Path, PureWindowsPath
from typing import BinaryIO, Optional, Union

from app.features.documents.exceptions import DocumentNotFoundError
from app.shared.constants import (
    ALLOWED_EXTENSIONS,
    CONTENT_TYPES,
    DEFAULT_CONTENT_TYPE,
    INVALID_FILE_TYPE_MESSAGE,
    MISSING_FILE_MESSAGE,
)

logger = logging.getLogger("OfficeDocs.Documents.Storage")


def clean_file_name(file_name: Optional[str]) -> str:
    """Final path component of a client-supplied name; '' when nothing usable is left."""
    if not file_name:
        return ""
    name = PureWindowsPath(file_name).name
    return "" if name in (".", "..") else name


def validate_upload(file_name: Optional[str]) -> Optional[str]:
    """Return a user-facing error message, or None when the upload is acceptable."""
    name = clean_file_name(file_name)
    if not name:
        return MISSING_FILE_MESSAGE
    if Path(name).suffix.lower() not in ALLOWED_EXTENSIONS:
        return INVALID_FILE_TYPE_MESSAGE
    return None


def staged_file_path(uploads_root: Path, file_name: str, layout: str = "nested") -> Path:
    """Build path to a staged file: {uploads_root}/{name}/{name} or {uploads_root}/{name}"""
    if layout == "flat":
        return uploads_root / file_name
    return uploads_root / file_name / file_name


def content_type_for(file_name: str) -> str:
    return CONTENT_TYPES.get(Path(file_name).suffix.lower(), DEFAULT_CONTENT_TYPE)


def download_file_name(stored_name: str, rule: str = "strip_prefix") -> str:
    """
    Name suggested to the browser for a stored file.

    With ``strip_prefix`` everything up to and including the first underscore
    is dropped ("abc_report.docx" -> "report.docx"); a name without an
    underscore comes back unchanged. ``verbatim`` keeps the stored name.
    """
    name = Path(stored_name).name
    if rule == "verbatim":
        return name
    return name[name.find("_") + 1:]


def _inside(root: Path, candidate: Path) -> bool:
    try:
        candidate.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


class DocumentStorage:
    """Writes uploads under the web root and resolves request paths back to files."""

    def __init__(self, web_root: Union[str, Path], uploads_dir: str = "uploads", layout: str = "nested"):
        self._web_root = Path(web_root)
        self._uploads_dir = uploads_dir
        self._layout = layout

    @property
    def web_root(self) -> Path:
        return self._web_root

    @property
    def uploads_root(self) -> Path:
        return self._web_root / self._uploads_dir

    def stage(self, file_name: str, source: BinaryIO) -> Path:
        """
        Copy the uploaded stream to its staged location and return the path.

        The caller is expected to have validated ``file_name``.
        """
        name = clean_file_name(file_name)
        path = staged_file_path(self.uploads_root, name, self._layout)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as out:
            shutil.copyfileobj(source, out)

        logger.info(f"Staged upload {name} at {path}")
        return path

    def relative_path(self, path: Path) -> str:
        """Path relative to the web root, as sent to and from the editor."""
        return path.relative_to(self._web_root).as_posix()

    def upload_key(self, path: Path) -> str:
        """Path relative to the uploads root, as accepted by the download endpoint."""
        return path.relative_to(self.uploads_root).as_posix()

    def resolve_web_path(self, file_path: str) -> Path:
        """
        Resolve an editor-supplied path (relative to the web root) to a staged file.

        Raises:
            DocumentNotFoundError: if the path is empty, escapes the web root,
                or does not name an existing file.
        """
        if not file_path:
            raise DocumentNotFoundError("No file path given")
        path = self._web_root / file_path
        if not _inside(self._web_root, path) or not path.is_file():
            raise DocumentNotFoundError(f"File not found: {file_path}")
        return path

    def resolve_upload(self, file_name: str) -> Path:
        """
        Resolve a download name against the uploads root.

        Raises:
            DocumentNotFoundError: if the name escapes the uploads root or
                does not name an existing file.
        """
        if not file_name:
            raise DocumentNotFoundError("No file name given")
        path = self.uploads_root / file_name
        if not _inside(self.uploads_root, path) or not path.is_file():
            raise DocumentNotFoundError(f"File not found: {file_name}")
        return path
