class ConversionError(ValueError):
    """Raised when an input cannot be converted without producing garbage."""
