"""
Errors Module
Exceptions raised while setting up class grouping.
"""


class ConfigurationError(ValueError):
    """Raised when group order, mapping or options are unusable."""
