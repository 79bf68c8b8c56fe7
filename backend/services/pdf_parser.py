import io
import logging

import pdfplumber

from models.schemas.resume import ExtractedText
from services.errors import UnreadablePDF

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


def extract_text(pdf_bytes: bytes) -> ExtractedText:
    """Extract all text from a PDF file.

    Raises UnreadablePDF when the bytes are not a parseable PDF.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        # pdfminer raises a wide range of error types for damaged streams
        logger.warning("PDF parsing failed: %s", e)
        raise UnreadablePDF("Could not parse PDF file") from e
    return ExtractedText(text="\n".join(pages).strip(), page_count=len(pages))
