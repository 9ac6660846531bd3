class StorageError(Exception):
    """Raised when sightings cannot be read from the store."""
