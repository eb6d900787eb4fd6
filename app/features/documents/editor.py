"""
Document Editor - Write text edits back to staged documents.

Word documents get the edit appended as a new paragraph. PowerPoint files are
handled according to the configured presentation update mode:

- sidecar: the text goes to a sibling ``<stem>.txt`` file and the
  presentation itself is left untouched
- in_place: a new slide with a text box holding the text is appended
"""

import logging
from pathlib import Path
from typing import Union

import docx
import pptx
from pptx.util import Inches

from app.features.documents.exceptions import DocumentUpdateError

logger = logging.getLogger("OfficeDocs.Documents.Editor")

_TEXT_BOX_MARGIN = Inches(0.5)


class DocumentEditor:
    """Apply text edits to Word and PowerPoint files on disk."""

    @classmethod
    def append_word_paragraph(cls, file_path: Union[str, Path], content: str) -> None:
        """
        Append one paragraph holding a single run with ``content``.

        The text is stored verbatim in one text node, so line breaks and tabs
        read back unchanged. Existing paragraphs are left as they are, so
        repeated edits accumulate.

        Raises:
            DocumentUpdateError: if the document has no body.
        """
        try:
            document = docx.Document(str(file_path))
            if document.element.body is None:
                raise DocumentUpdateError("Word document body not found.")

            # One w:t node; Run.text would turn \n and \t into w:br and w:tab
            paragraph = document.add_paragraph()
            paragraph.add_run()._r.add_t(content)
            document.save(str(file_path))
            logger.info(f"Appended {len(content)} chars to Word document: {file_path}")

        except Exception as e:
            logger.error(f"Error updating Word document content for {file_path}: {e}")
            raise

    @classmethod
    def write_presentation_sidecar(cls, file_path: Union[str, Path], content: str) -> Path:
        """Write ``content`` next to the presentation as ``<stem>.txt`` and return that path."""
        text_path = Path(file_path).with_suffix(".txt")
        text_path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote presentation text to {text_path}")
        return text_path

    @classmethod
    def append_presentation_slide(cls, file_path: Union[str, Path], content: str) -> None:
        """
        Append a slide with one text box holding ``content``.

        Uses the "Blank" layout when the presentation has one, otherwise the
        first layout.

        Raises:
            DocumentUpdateError: if the presentation has no slide layouts.
        """
        try:
            presentation = pptx.Presentation(str(file_path))
            layouts = list(presentation.slide_layouts)
            if not layouts:
                raise DocumentUpdateError("Presentation has no slide layouts.")

            layout = next((l for l in layouts if l.name == "Blank"), layouts[0])
            slide = presentation.slides.add_slide(layout)

            text_box = slide.shapes.add_textbox(
                _TEXT_BOX_MARGIN,
                _TEXT_BOX_MARGIN,
                presentation.slide_width - 2 * _TEXT_BOX_MARGIN,
                presentation.slide_height - 2 * _TEXT_BOX_MARGIN,
            )
            text_box.text_frame.text = content
            presentation.save(str(file_path))
            logger.info(f"Appended slide {len(presentation.slides)} to presentation: {file_path}")

        except Exception as e:
            logger.error(f"Error updating PowerPoint content for {file_path}: {e}")
            raise
