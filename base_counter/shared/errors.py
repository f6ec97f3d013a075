class CounterError(Exception):
    """Base error for domain failures; carries the HTTP status to report."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AddressVerificationError(CounterError):
    status_code = 403


class ClaimLimitError(CounterError):
    status_code = 429


class ConfigurationError(CounterError):
    status_code = 500


class UpstreamServiceError(CounterError):
    status_code = 502
