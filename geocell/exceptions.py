class InvalidArgument(ValueError):
    """Raised for out of range precisions, malformed geohash strings and inverted query rectangles."""
