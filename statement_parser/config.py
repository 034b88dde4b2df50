from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Dict

import yaml

from statement_parser.core.categorizer import DEFAULT_CATEGORIES
from statement_parser.core.models import ESSENTIALS, INCOME

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, object] = {
    "file_loaders": {
        ".csv": "statement_parser.loaders.csv_loader.CSVLoader",
        ".pdf": "statement_parser.loaders.pdf_loader.PDFLoader",
    },
    "statement_extractors": {
        "chase": "statement_parser.extractors.chase.ChaseExtractor",
    },
    "output_modules": {
        "csv": "statement_parser.outputs.csv_output.CSVOutput",
        "table": "statement_parser.outputs.table_output.TableOutput",
    },
    "categories": DEFAULT_CATEGORIES,
    "default_category": ESSENTIALS,
    "income_category": INCOME,
    "csv_fields": {
        "date": ["date", "transaction date", "posted date"],
        "description": ["description", "transaction", "details", "merchant", "name", "memo"],
        "amount": ["amount", "transaction amount", "debit", "credit", "value"],
    },
    "pdf": {
        "skip_summary_page": True,
        "preview_chars": 500,
        "laparams": None,
    },
    "output_dir": "./data",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def default_config() -> Dict[str, object]:
    return copy.deepcopy(DEFAULT_CONFIG)


def with_defaults(config: Dict[str, object] | None) -> Dict[str, object]:
    """Return ``config`` with every key it leaves out taken from the defaults."""
    if not config:
        return default_config()
    return _merge_defaults(config, DEFAULT_CONFIG)


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    """Load a YAML config file, filling anything it leaves out from the defaults."""
    if path is None:
        return default_config()
    target = Path(path)
    if not target.exists():
        logger.info("Config file %s not found, using defaults", target)
        return default_config()
    with target.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {target} must contain a mapping, got {type(data).__name__}")
    return with_defaults(data)
