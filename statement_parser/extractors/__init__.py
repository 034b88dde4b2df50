# statement_parser/extractors/__init__.py
import logging
from importlib import import_module

from statement_parser.extractors.generic import GenericExtractor

logger = logging.getLogger(__name__)


def _import_class(path):
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)


def get_extractor(text, filename, config):
    """
    Return the first configured bank-specific extractor that recognizes the
    statement, or the generic extractor when none does.
    """
    for name, path in (config.get('statement_extractors') or {}).items():
        cls = _import_class(path)
        if cls.matches(text, filename):
            logger.info("Detected %s statement", name)
            return cls(config)
    return GenericExtractor(config)
