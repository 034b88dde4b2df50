# statement_parser/loaders/base.py
import os
from abc import ABC, abstractmethod

from statement_parser.config import with_defaults


def source_name(source, filename=None):
    """Best-effort file name for a path or an open file object."""
    if filename:
        return os.path.basename(str(filename))
    name = getattr(source, 'name', source)
    return os.path.basename(str(name)) if isinstance(name, (str, os.PathLike)) else ''


class BaseLoader(ABC):
    label = "file"

    def __init__(self, config=None):
        self.config = with_defaults(config)

    @abstractmethod
    def load(self, source, filename=None):
        """
        Return the list of Transaction instances found in ``source``, a path
        or binary file object. ``filename`` overrides the name used for
        bank detection. Raise ParseError when nothing usable is found.
        """
        pass
