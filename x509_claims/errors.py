class ConfigurationError(ValueError):
    """Raised when a claims pipeline is assembled from incompatible parts."""
