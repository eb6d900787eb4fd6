"""
Document Extractor - Extract plain text from staged Office documents.

Supports:
- Word (.doc, .docx): text of the main document body, using python-docx
- PowerPoint (.ppt, .pptx): text of every slide in order, using python-pptx

Extraction never raises. A failure is returned as an ExtractionResult whose
content is a readable error message, so callers can show it in place of the
document text.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Union

import docx
from pptx.opc.constants import CONTENT_TYPE as CT
from pptx.package import Package

from app.shared.constants import POWERPOINT_EXTENSIONS, PRESENTATION_EMPTY, WORD_EXTENSIONS

logger = logging.getLogger("OfficeDocs.Documents.Extractor")

_PRESENTATION_CONTENT_TYPES = (CT.PML_PRESENTATION_MAIN, CT.PML_PRES_MACRO_MAIN)

# Leaf text of the body, including tracked deletions and field codes
_WORD_TEXT_XPATH = ".//w:t | .//w:delText | .//w:instrText"


class ExtractionStatus(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ExtractionResult:
    """
    Outcome of a text extraction.

    Attributes:
        status: SUCCESS or ERROR
        content: Extracted text, or the error message shown to the user
    """
    status: ExtractionStatus
    content: str = ""

    @property
    def is_success(self) -> bool:
        return self.status == ExtractionStatus.SUCCESS

    @classmethod
    def success(cls, text: str) -> "ExtractionResult":
        return cls(status=ExtractionStatus.SUCCESS, content=text)

    @classmethod
    def failure(cls, message: str) -> "ExtractionResult":
        return cls(status=ExtractionStatus.ERROR, content=message)


class DocumentExtractor:
    """Extract text content from Word and PowerPoint files on disk."""

    @classmethod
    def extract(cls, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Extract text from a staged document, dispatching on its extension.

        Files with any other extension yield an empty successful result.
        """
        ext = Path(file_path).suffix.lower()

        if ext in WORD_EXTENSIONS:
            return cls.extract_word(file_path)
        elif ext in POWERPOINT_EXTENSIONS:
            return cls.extract_powerpoint(file_path)

        logger.warning(f"No extractor for extension '{ext}': {file_path}")
        return ExtractionResult.success("")

    @classmethod
    def extract_word(cls, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Concatenate every text node of the main document body in document order.

        Deleted text and field instructions count too. Paragraph boundaries are
        not marked: paragraphs "A" and "B" give "AB".
        """
        try:
            document = docx.Document(str(file_path))
            body = document.element.body
            if body is None:
                raise ValueError("Word document body not found.")

            text = "".join(t.text or "" for t in body.xpath(_WORD_TEXT_XPATH))
            logger.info(f"Extracted {len(text)} chars from Word document: {file_path}")
            return ExtractionResult.success(text)

        except Exception as e:
            logger.error(f"Error extracting Word content from {file_path}: {e}")
            return ExtractionResult.failure(f"Error reading Word document content: {e}")

    @classmethod
    def extract_powerpoint(cls, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Collect slide text in slide-ID-list order.

        Each slide contributes its text runs joined by newlines, followed by a
        newline. A package without a presentation part, or a presentation
        without a slide list, is reported as empty.
        """
        try:
            package = Package.open(str(file_path))
            try:
                presentation_part = package.main_document_part
            except KeyError:
                return ExtractionResult.success(PRESENTATION_EMPTY)

            if presentation_part.content_type not in _PRESENTATION_CONTENT_TYPES:
                raise ValueError(
                    f"file '{file_path}' is not a PowerPoint file, "
                    f"content type is '{presentation_part.content_type}'"
                )

            presentation = presentation_part.presentation
            if presentation.element.sldIdLst is None:
                return ExtractionResult.success(PRESENTATION_EMPTY)

            blocks: List[str] = []
            for slide in presentation.slides:
                runs = [t.text or "" for t in slide.element.xpath(".//a:t")]
                blocks.append("\n".join(runs) + "\n")

            text = "".join(blocks)
            logger.info(
                f"Extracted {len(text)} chars from {len(blocks)} slides: {file_path}"
            )
            return ExtractionResult.success(text)

        except Exception as e:
            logger.error(f"Error extracting PowerPoint content from {file_path}: {e}")
            return ExtractionResult.failure(f"Error reading PowerPoint presentation content: {e}")
