"""Error types raised by the services and mapped to HTTP responses."""


class DashboardError(Exception):
    """Base class for all request-level failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFormat(DashboardError):
    """Seed payload is not an array of transaction objects."""


class InvalidMonth(DashboardError):
    """Month name is not one of the twelve English month names."""

    status_code = 400

    def __init__(self, month: str):
        super().__init__("Invalid month provided.")
        self.month = month


class UpstreamFetchFailure(DashboardError):
    """Seed source unreachable or answered with an error status."""


class StoreFailure(DashboardError):
    """Any error raised by the record store."""
