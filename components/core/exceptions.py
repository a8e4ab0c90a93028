"""Error taxonomy shared by the stores and the HTTP layer."""


class FinanceTrackerError(Exception):
    """Base class for errors surfaced to API clients."""
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FinanceTrackerError):
    """A required field is missing, empty or malformed."""
    status_code = 400
    default_message = "Missing required fields"


class NotFoundError(FinanceTrackerError):
    """The operation targets an id that does not exist."""
    status_code = 404
    default_message = "Record not found"


class StoreError(FinanceTrackerError):
    """The backing store failed; the client only sees a generic message."""
    status_code = 500
