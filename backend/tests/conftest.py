"""Shared test configuration, fixtures and pytest markers."""

import os

# Pin collaborators to "not configured" before any application module reads settings
os.environ["GEMINI_API_KEY"] = ""
os.environ["RAPIDAPI_KEY"] = ""
os.environ["MONGODB_URI"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest

from services import gemini_client, jsearch_client, store


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the full upload/search/track flow through the API"
    )


@pytest.fixture(autouse=True)
def _fresh_state():
    store.reset()
    gemini_client.reset_client()
    jsearch_client._client = None
    yield
    store.reset()


def _escape(line: str) -> str:
    return line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(lines: list[str]) -> bytes:
    """Single-page PDF with one Helvetica text line per entry."""
    ops = ["BT", "/F1 11 Tf", "14 TL", "50 750 Td"]
    ops += [f"({_escape(line)}) Tj T*" for line in lines]
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


SAMPLE_RESUME_LINES = [
    "John Doe",
    "Senior Software Engineer",
    "Location: Austin, Texas",
    "john@example.com | (555) 123-4567",
    "linkedin.com/in/johndoe",
    "Skills: JavaScript, React, Node.js, Docker",
]


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def sample_resume_pdf():
    return build_pdf(SAMPLE_RESUME_LINES)
