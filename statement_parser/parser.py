"""Entry points for turning statement files into transactions."""
from __future__ import annotations

import functools
import logging
import os
from typing import Dict, Iterable, List

import anyio

from statement_parser.config import with_defaults
from statement_parser.core.models import Transaction
from statement_parser.exceptions import ParseError, UnsupportedFileError
from statement_parser.loaders import get_loader
from statement_parser.loaders.base import source_name

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = ('.xlsx', '.xls')


class StatementParser:
    """
    Long-lived parser that dispatches each file to a loader by extension.

    Loaders are created on first use and reused for later files, so PDF
    text extraction is only set up once per parser.
    """

    def __init__(self, config: dict | None = None):
        self.config = with_defaults(config)
        self._loaders: Dict[str, object] = {}

    def loader_for(self, name: str):
        ext = os.path.splitext(name)[1].lower()
        if ext in EXCEL_EXTENSIONS:
            raise UnsupportedFileError(f"Excel files ({ext.lstrip('.')}) are not yet supported.")
        if ext not in self._loaders:
            loader = get_loader(ext, self.config)
            if loader is None:
                raise UnsupportedFileError(f"Unsupported file type: {ext.lstrip('.') or name or 'unknown'}")
            self._loaders[ext] = loader
        return self._loaders[ext]

    def parse(self, source, filename: str | None = None) -> List[Transaction]:
        """
        Parse one statement, given as a path or a binary file object.

        Raises ParseError (or UnsupportedFileError) when the file yields no
        transactions at all.
        """
        name = source_name(source, filename)
        loader = self.loader_for(name)
        try:
            txs = loader.load(source, filename=name)
        except ParseError as exc:
            logger.error("Error parsing %s: %s", name, exc)
            raise ParseError(f"Error parsing {loader.label}: {exc}") from exc
        except Exception as exc:
            logger.exception("Unexpected error parsing %s", name)
            raise ParseError(f"Error parsing {loader.label}: {exc}") from exc
        logger.info("Parsed %d transaction(s) from %s", len(txs), name)
        return txs

    def preview(self, source, filename: str | None = None) -> str:
        """Diagnostic sample of a PDF's first page; never raises for unreadable PDFs."""
        loader = self.loader_for(source_name(source, filename))
        if not hasattr(loader, 'preview'):
            raise UnsupportedFileError(f"Preview is only available for PDF files, not {loader.label}")
        return loader.preview(source)


def parse_file(source, config: dict | None = None, filename: str | None = None) -> List[Transaction]:
    return StatementParser(config).parse(source, filename=filename)


def parse_files(paths: Iterable[str], config: dict | None = None) -> Dict[str, List[Transaction]]:
    """
    Parse several files independently with a shared parser.

    The first failure is raised; use StatementParser.parse directly to keep
    going past bad files.
    """
    parser = StatementParser(config)
    return {path: parser.parse(path) for path in paths}


async def parse_file_async(source, config: dict | None = None,
                           filename: str | None = None) -> List[Transaction]:
    """Await :func:`parse_file` from async code; the parse runs in a worker thread."""
    return await anyio.to_thread.run_sync(
        functools.partial(parse_file, source, config, filename)
    )
