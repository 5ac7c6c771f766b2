class HuffmanError(Exception):
    """Base class for errors raised while reading a compressed stream."""


class MalformedHeaderError(HuffmanError, ValueError):
    """The frequency table preamble cannot be parsed."""


class TruncatedStreamError(HuffmanError, EOFError):
    """The bit body ended before the end marker was decoded."""
