"""Exceptions raised while loading the prize catalog."""


class CatalogError(RuntimeError):
    """Base class for failures on the catalog fetch path."""


class DataUnavailable(CatalogError):
    """The remote sheet returned no prize rows."""


class NetworkFailure(CatalogError):
    """The request to the remote sheet failed at the transport or HTTP level."""


__all__ = ["CatalogError", "DataUnavailable", "NetworkFailure"]
