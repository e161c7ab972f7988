"""
Domain exceptions raised by use cases and mapped to HTTP responses by the API.

Hierarchy:
    DomainError
    ├── ValidationError        - bad or missing input (400)
    ├── NotFoundError          - unknown poem/submission/recording/favorite (404)
    ├── AlreadyProcessedError  - transition attempted out of a terminal state (409)
    ├── ConflictError          - duplicate favorite (409)
    ├── AuthenticationError    - missing or invalid session (401)
    ├── AuthorizationError     - authenticated but not an admin (403)
    └── UpstreamError          - blob store or notification failure (502)
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for errors that surface to API callers."""

    status_code: int = 400

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(DomainError):
    status_code = 400


class NotFoundError(DomainError):
    status_code = 404


class AlreadyProcessedError(DomainError):
    status_code = 409


class ConflictError(DomainError):
    status_code = 409


class AuthenticationError(DomainError):
    status_code = 401


class AuthorizationError(DomainError):
    status_code = 403


class UpstreamError(DomainError):
    status_code = 502
