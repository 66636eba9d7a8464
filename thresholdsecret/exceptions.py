class ThresholdSecretError(Exception):
    """Base exception class."""


class ConfigurationError(ThresholdSecretError):
    """Raise for configuration errors."""


class InvalidEncoding(ThresholdSecretError):
    """Raised when a radix is unsupported or a digit is not valid in it."""


class MalformedDocument(ThresholdSecretError):
    """Raised when a share document is not a well-formed object."""


class SchemaError(ThresholdSecretError):
    """Raised when ``keys``, ``n`` or ``k`` are missing or mistyped."""


class InsufficientShares(ThresholdSecretError):
    """Raised when fewer than k usable shares are available."""


class DuplicateAbscissa(ThresholdSecretError):
    """Raised when two interpolation points share the same x."""


class NonIntegralSecret(ThresholdSecretError):
    """Raised when the shares do not lie on an integer-coefficient polynomial."""
