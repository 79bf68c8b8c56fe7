import pytest

from services.errors import UnreadablePDF
from services.pdf_parser import extract_text


def test_extract_text_lines(make_pdf):
    extracted = extract_text(make_pdf(["Jane Doe", "Python Developer", "jane@example.com"]))
    assert extracted.page_count == 1
    assert "Jane Doe" in extracted.text
    assert "Python Developer" in extracted.text
    assert "jane@example.com" in extracted.text


def test_extract_text_escaped_parentheses(make_pdf):
    extracted = extract_text(make_pdf(["Phone: (555) 123-4567"]))
    assert "(555) 123-4567" in extracted.text


def test_extract_text_empty_page(make_pdf):
    extracted = extract_text(make_pdf([]))
    assert extracted.page_count == 1
    assert extracted.text == ""


def test_extract_text_rejects_garbage():
    with pytest.raises(UnreadablePDF):
        extract_text(b"this is definitely not a pdf")


def test_extract_text_rejects_empty_bytes():
    with pytest.raises(UnreadablePDF):
        extract_text(b"")
