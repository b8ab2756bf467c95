"""Error taxonomy shared by resolvers, caches, providers and the store."""


class CityExplorerError(Exception):
    """Base class for every failure surfaced to request handlers."""


class NoDataError(CityExplorerError):
    """The provider answered, but had nothing for the query (unknown place)."""


class UpstreamError(CityExplorerError):
    """Transport failure, non-success status or unexpected body from a provider."""

    def __init__(self, provider: str, detail: str, status_code: int | None = None):
        self.provider = provider
        self.detail = detail
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"{provider}: {detail} (status={status_code})")
        else:
            super().__init__(f"{provider}: {detail}")


class StorageError(CityExplorerError):
    """Connection or query failure against the relational store."""


class DuplicateKeyError(StorageError):
    """A write collided with a unique constraint."""
