"""
HTTP Module

Provides the shared async HTTP client and the request error type.
"""

from .client import HttpClient, Response, RequestError, get_client, set_client
from .errors import logs_request_errors

__all__ = [
    "HttpClient",
    "Response",
    "RequestError",
    "get_client",
    "set_client",
    "logs_request_errors",
]
