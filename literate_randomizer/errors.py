"""
Error types raised by literate_randomizer.

Sampling on an exhausted chain is not an error (the sampler returns None);
these exceptions cover the failures that must reach the caller.
"""


class LiterateRandomizerError(Exception):
    """Base class for all literate_randomizer errors."""


class EmptyCorpusError(LiterateRandomizerError, ValueError):
    """Raised when the source material contains no usable words."""


class InvalidRangeError(LiterateRandomizerError, ValueError):
    """Raised when a word/sentence/paragraph count cannot be resolved."""


class ConfigurationError(LiterateRandomizerError, ValueError):
    """Raised for malformed configuration files or option values."""


class SourceMaterialError(LiterateRandomizerError, OSError):
    """Raised when source material cannot be read."""
