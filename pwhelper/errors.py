class InvalidHashConfig(ValueError):
    """Raised when hashing parameters can't produce a valid derivation."""
