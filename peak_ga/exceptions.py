"""Exception types shared across the package"""


class ConfigurationError(ValueError):
    """Raised when run parameters are invalid, before any evolution starts"""
