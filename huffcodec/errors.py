"""Exceptions raised by the Huffman codec."""


class HuffException(Exception):
    """Base class for all codec errors."""


class FormatError(HuffException):
    """Compressed stream is not valid: bad magic, truncated or malformed."""


class InvariantViolation(HuffException):
    """Internal consistency check failed while compressing."""
