import io
from pathlib import Path
from typing import Callable

import docx
from docx.oxml import OxmlElement

from app.features.documents.extractor import DocumentExtractor, ExtractionStatus
from app.shared.constants import PRESENTATION_EMPTY


def _docx_with_leaf(tag: str, text: str) -> bytes:
    """Paragraph "A" followed by a run holding one ``tag`` element."""
    document = docx.Document()
    paragraph = document.add_paragraph("A")
    leaf = OxmlElement(tag)
    leaf.text = text
    paragraph.add_run()._r.append(leaf)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


class TestWordExtraction:
    def test_paragraphs_concatenate_without_separator(
        self, write_file: Callable[[str, bytes], Path], docx_bytes: bytes
    ) -> None:
        path = write_file("ab.docx", docx_bytes)

        result = DocumentExtractor.extract(path)

        assert result.is_success
        assert result.content == "AB"

    def test_uppercase_extension_dispatches_to_word(
        self, write_file: Callable[[str, bytes], Path], docx_bytes: bytes
    ) -> None:
        path = write_file("AB.DOCX", docx_bytes)

        assert DocumentExtractor.extract(path).content == "AB"

    def test_three_paragraphs_run_together(
        self, write_file: Callable[[str, bytes], Path], make_docx: Callable
    ) -> None:
        path = write_file("three.docx", make_docx(["Hello ", "big ", "world"]))

        assert DocumentExtractor.extract(path).content == "Hello big world"

    def test_empty_document_gives_empty_text(
        self, write_file: Callable[[str, bytes], Path], make_docx: Callable
    ) -> None:
        path = write_file("empty.docx", make_docx([]))

        result = DocumentExtractor.extract(path)

        assert result.is_success
        assert result.content == ""

    def test_deleted_text_is_included(self, write_file: Callable[[str, bytes], Path]) -> None:
        path = write_file("tracked.docx", _docx_with_leaf("w:delText", "gone"))

        assert DocumentExtractor.extract(path).content == "Agone"

    def test_field_instructions_are_included(self, write_file: Callable[[str, bytes], Path]) -> None:
        path = write_file("field.docx", _docx_with_leaf("w:instrText", "PAGE"))

        assert DocumentExtractor.extract(path).content == "APAGE"

    def test_corrupt_file_degrades_to_message(self, write_file: Callable[[str, bytes], Path]) -> None:
        path = write_file("broken.docx", b"not a zip at all")

        result = DocumentExtractor.extract(path)

        assert result.status == ExtractionStatus.ERROR
        assert result.content.startswith("Error reading Word document content: ")

    def test_legacy_doc_is_reported_not_raised(self, write_file: Callable[[str, bytes], Path]) -> None:
        path = write_file("legacy.doc", b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64)

        result = DocumentExtractor.extract(path)

        assert not result.is_success
        assert "Error reading Word document content" in result.content


class TestPowerPointExtraction:
    def test_slides_are_newline_joined_blocks_in_order(
        self, write_file: Callable[[str, bytes], Path], pptx_bytes: bytes
    ) -> None:
        path = write_file("deck.pptx", pptx_bytes)

        result = DocumentExtractor.extract(path)

        assert result.is_success
        assert result.content == "S1\nS2\n"

    def test_runs_within_a_slide_are_joined_by_newlines(
        self, write_file: Callable[[str, bytes], Path], make_pptx: Callable
    ) -> None:
        path = write_file("deck.pptx", make_pptx([["Title", "Body"], ["Last"]]))

        assert DocumentExtractor.extract(path).content == "Title\nBody\nLast\n"

    def test_missing_presentation_part_is_empty(
        self, write_file: Callable[[str, bytes], Path], empty_package_bytes: bytes
    ) -> None:
        path = write_file("hollow.pptx", empty_package_bytes)

        result = DocumentExtractor.extract(path)

        assert result.is_success
        assert result.content == PRESENTATION_EMPTY == "Presentation is empty."

    def test_presentation_without_slide_list_is_empty(
        self, write_file: Callable[[str, bytes], Path], make_pptx: Callable
    ) -> None:
        path = write_file("blank.pptx", make_pptx([]))

        assert DocumentExtractor.extract(path).content == PRESENTATION_EMPTY

    def test_word_file_named_pptx_is_reported(
        self, write_file: Callable[[str, bytes], Path], docx_bytes: bytes
    ) -> None:
        path = write_file("renamed.pptx", docx_bytes)

        result = DocumentExtractor.extract(path)

        assert not result.is_success
        assert result.content.startswith("Error reading PowerPoint presentation content: ")

    def test_corrupt_presentation_degrades_to_message(
        self, write_file: Callable[[str, bytes], Path]
    ) -> None:
        path = write_file("broken.ppt", b"garbage")

        result = DocumentExtractor.extract(path)

        assert not result.is_success
        assert result.content.startswith("Error reading PowerPoint presentation content: ")


class TestDispatch:
    def test_unknown_extension_yields_empty_success(
        self, write_file: Callable[[str, bytes], Path]
    ) -> None:
        path = write_file("notes.txt", b"plain")

        result = DocumentExtractor.extract(path)

        assert result.is_success
        assert result.content == ""
