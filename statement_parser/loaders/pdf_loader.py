# statement_parser/loaders/pdf_loader.py
import logging

from statement_parser.exceptions import ParseError
from statement_parser.extractors import get_extractor
from statement_parser.loaders.base import BaseLoader, source_name
from statement_parser.pdf_text import PDFTextExtractor

logger = logging.getLogger(__name__)


class PDFLoader(BaseLoader):
    """
    Loader for PDF statements.

    Text from the transaction pages is handed to the first bank-specific
    extractor that recognizes it, or to the generic extractor.
    """
    label = "PDF"

    def __init__(self, config=None):
        super().__init__(config)
        pdf_cfg = self.config.get('pdf') or {}
        self.text_extractor = PDFTextExtractor(
            skip_summary_page=pdf_cfg.get('skip_summary_page', True),
            laparams=pdf_cfg.get('laparams'),
        )
        self.preview_chars = pdf_cfg.get('preview_chars', 500)

    def load(self, source, filename=None):
        text = self.text_extractor.extract_text(source)
        extractor = get_extractor(text, source_name(source, filename), self.config)
        txs = extractor.extract(text)
        if not txs:
            raise ParseError(
                "Could not extract any transactions from PDF. The file may not contain "
                "recognizable transaction data or may be in an unsupported format."
            )
        return txs

    def preview(self, source):
        return self.text_extractor.preview(source, self.preview_chars)
