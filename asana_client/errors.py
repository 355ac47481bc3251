"""Exceptions raised by the Asana API client."""


class AsanaClientError(Exception):
    """Base class for errors raised by this package."""


class UnexpectedStatusError(AsanaClientError):
    """The API answered, but not with the status code the call expects.

    Raised for any mismatch (other 2xx codes included). The response body is
    left unparsed.
    """

    def __init__(self, method: str, url: str, status_code: int, expected_status: int):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.expected_status = expected_status
        super().__init__(
            f"Asana API returned status code {status_code} "
            f"(expected {expected_status}) for {method} {url}"
        )
