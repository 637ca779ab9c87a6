class RatingInitializationError(RuntimeError):
    """Raised when a rating tracker is built without a usable store."""
