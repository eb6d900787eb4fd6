import io
import zipfile
from pathlib import Path
from typing import Callable, List

import docx
import pptx
import pytest
from pptx.util import Inches

from app.core.config import Config
from app.features.documents import DocumentService

_CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)
_EMPTY_RELS_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships"/>'
)


def build_docx(paragraphs: List[str]) -> bytes:
    """Word document with one paragraph per entry."""
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


def build_pptx(slides: List[List[str]]) -> bytes:
    """Presentation on the Blank layout with one text box per string, slide by slide."""
    presentation = pptx.Presentation()
    blank = next(l for l in presentation.slide_layouts if l.name == "Blank")
    for texts in slides:
        slide = presentation.slides.add_slide(blank)
        for i, text in enumerate(texts):
            box = slide.shapes.add_textbox(Inches(1), Inches(1 + i), Inches(6), Inches(1))
            box.text_frame.text = text
    buf = io.BytesIO()
    presentation.save(buf)
    return buf.getvalue()


def build_package_without_presentation() -> bytes:
    """Valid OPC zip with no office-document relationship."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("[Content_Types].xml", _CONTENT_TYPES_XML)
        zf.writestr("_rels/.rels", _EMPTY_RELS_XML)
    return buf.getvalue()


@pytest.fixture()
def make_docx() -> Callable[[List[str]], bytes]:
    return build_docx


@pytest.fixture()
def make_pptx() -> Callable[[List[List[str]]], bytes]:
    return build_pptx


@pytest.fixture()
def docx_bytes() -> bytes:
    """Word document with paragraphs "A" and "B"."""
    return build_docx(["A", "B"])


@pytest.fixture()
def pptx_bytes() -> bytes:
    """Two slides holding "S1" and "S2"."""
    return build_pptx([["S1"], ["S2"]])


@pytest.fixture()
def empty_package_bytes() -> bytes:
    return build_package_without_presentation()


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write bytes to tmp_path/<name> and return the path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture()
def web_root(tmp_path: Path) -> Path:
    root = tmp_path / "wwwroot"
    root.mkdir()
    return root


@pytest.fixture()
def make_config(web_root: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., Config]:
    """Config pointed at a temporary web root; keyword arguments become environment variables."""

    def _make(**env: str) -> Config:
        monkeypatch.setenv("WEB_ROOT", str(web_root))
        for key in ("STAGING_LAYOUT", "PRESENTATION_UPDATE_MODE", "DOWNLOAD_NAME_RULE", "UPLOADS_DIR"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Config()

    return _make


@pytest.fixture()
def service(make_config: Callable[..., Config]) -> DocumentService:
    return DocumentService(make_config())
