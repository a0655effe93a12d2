from typing import Dict, List, Optional


class ProfileServiceError(Exception):
    """Base class for errors raised while serving profile operations."""

    status_code: int = 500

    def __init__(self, message: str = "Server Error"):
        super().__init__(message)
        self.message = message


class ProfileValidationError(ProfileServiceError):
    """Raised when a request body violates one or more declared field rules."""

    status_code = 400

    def __init__(self, failures: List[Dict[str, str]]):
        super().__init__("Request validation failed")
        self.failures = failures


class MalformedURLError(ProfileServiceError):
    """Raised when a URL-like value cannot be read as a host-bearing URL."""

    status_code = 400

    def __init__(self, value: str, field: Optional[str] = None):
        super().__init__(f"Invalid URL: {value!r}")
        self.value = value
        self.field = field

    @property
    def failures(self) -> List[Dict[str, str]]:
        return [{"field": self.field or "url", "message": "Please include a valid URL"}]


class ProfileNotFoundError(ProfileServiceError):
    """Raised when no profile matches the requested owner."""

    status_code = 400

    def __init__(self, message: str = "Profile not found"):
        super().__init__(message)


class GithubProfileNotFoundError(ProfileServiceError):
    """Raised when GitHub does not return repositories for a username."""

    status_code = 404

    def __init__(self, username: str, upstream_status: Optional[int] = None):
        super().__init__("No Github profile found")
        self.username = username
        self.upstream_status = upstream_status


class StorageError(ProfileServiceError):
    """Raised when the document store is unreachable or rejects a write."""


class UpstreamError(ProfileServiceError):
    """Raised when an outbound call to a third-party API fails in transport."""


class AuthenticationError(ProfileServiceError):
    """Raised when a private route is called without a valid access token."""

    status_code = 401
