class ParseError(RuntimeError):
    """A statement file could not be turned into any transactions."""


class UnsupportedFileError(ParseError):
    """The file type is recognized as unsupported or is unknown."""
