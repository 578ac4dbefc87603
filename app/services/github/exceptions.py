"""Exceptions for GitHub enrichment lookups."""


class GitHubAPIError(Exception):
    """GitHub answered an enrichment lookup with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        # Unix timestamp at which the rate limit window resets
        self.rate_limit_reset = rate_limit_reset
        super().__init__(message)

    @property
    def is_rate_limited(self) -> bool:
        return self.rate_limit_reset is not None

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"
