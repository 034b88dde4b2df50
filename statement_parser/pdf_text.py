"""Text extraction from PDF statements."""

import logging
from typing import Optional

import pdfplumber

from statement_parser.exceptions import ParseError

logger = logging.getLogger(__name__)


class PDFTextExtractor:
    """
    Reads the text layer of a PDF statement.

    The extractor is initialized once and reused; every call checks that it
    is ready first. Only text layers are read, scanned pages yield nothing.
    """

    def __init__(self, skip_summary_page: bool = True, laparams: Optional[dict] = None):
        self.skip_summary_page = skip_summary_page
        self.laparams = laparams
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def initialize(self) -> None:
        if self._ready:
            return
        logger.debug("Using pdfplumber %s", getattr(pdfplumber, '__version__', 'unknown'))
        self._ready = True

    def _open(self, source):
        self.initialize()
        try:
            return pdfplumber.open(source, laparams=self.laparams)
        except Exception as exc:
            raise ParseError(f"Failed to load PDF document: {exc}") from exc

    @staticmethod
    def _page_text(page) -> str:
        text = page.extract_text() or ''
        lines = (' '.join(line.split()) for line in text.splitlines())
        return '\n'.join(line for line in lines if line)

    def extract_text(self, source) -> str:
        """
        Return the text of every transaction page, one visual line per line.

        The first page of a multi-page statement is an account summary and is
        skipped. A page that fails to decode is logged and left out.
        """
        with self._open(source) as pdf:
            pages = pdf.pages
            start = 1 if self.skip_summary_page and len(pages) > 1 else 0
            chunks = []
            for number, page in enumerate(pages[start:], start=start + 1):
                try:
                    chunks.append(self._page_text(page))
                except Exception as exc:
                    logger.error("Error extracting text from page %d: %s", number, exc)

        all_text = '\n'.join(chunk for chunk in chunks if chunk)
        if not all_text:
            raise ParseError("Could not extract any text from the PDF")
        logger.info("Extracted %d characters from %d page(s)", len(all_text), len(chunks))
        return all_text

    def preview(self, source, limit: int = 500) -> str:
        """Describe whether the first page can be read, with a text sample."""
        try:
            with self._open(source) as pdf:
                page_text = self._page_text(pdf.pages[0])
        except ParseError as exc:
            return str(exc)
        except Exception as exc:
            return f"Failed to extract text from PDF: {exc}"
        return f"PDF parsed successfully! Sample text: {page_text[:limit]}..."
