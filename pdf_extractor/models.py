"""
Data Models for Document Text Extraction

Defines:
1. RawDocument - an uploaded file as received by the request handler
2. ExtractedPage - plain text of a single PDF page
3. ExtractionResult - all pages of a document plus basic metadata

Design Principles:
- Pydantic v2 for validation and serialization
- RawDocument is a plain dataclass because it carries an open stream
- Nothing here is persisted; results live for one request
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, BinaryIO

from pydantic import BaseModel, Field

PAGE_SEPARATOR = "\n\n"


@dataclass
class RawDocument:
    """
    An uploaded document: byte stream, declared content type and file name.

    Owned by the request handler; the stream is closed once extraction ends.
    """
    stream: BinaryIO
    content_type: str
    file_name: str = "document.pdf"


class ExtractedPage(BaseModel):
    """Plain text of one page."""
    page_number: int = Field(
        ...,
        description="Page number (1-indexed)",
        ge=1,
    )
    content: str = Field(
        "",
        description="Cleaned plain text of the page",
    )

    @property
    def has_text(self) -> bool:
        return bool(self.content.strip())


class ExtractionResult(BaseModel):
    """
    Text extracted from a PDF, page by page.

    The joined plain text is available as `text`.
    """
    file_name: str = Field(
        "document.pdf",
        description="Declared name of the uploaded file",
    )
    page_count: int = Field(
        0,
        description="Total number of pages in the PDF",
        ge=0,
    )
    pages: list[ExtractedPage] = Field(
        default_factory=list,
        description="Pages that carry text, in document order",
    )
    extracted_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="When extraction was performed",
    )

    @property
    def text(self) -> str:
        return PAGE_SEPARATOR.join(p.content for p in self.pages if p.has_text)

    @property
    def char_count(self) -> int:
        return len(self.text)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
