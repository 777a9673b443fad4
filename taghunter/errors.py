class TaghunterError(Exception):
    pass


class StoreInitError(TaghunterError):
    """Opening, migrating or seeding the store failed. Fatal at startup."""


class StorageError(TaghunterError):
    """A read query could not be served; str() is the underlying cause."""
