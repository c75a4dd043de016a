"""Failure kinds of a relay request. Each one ends the request with a structured body."""

from typing import Optional


class RelayError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, error: Optional[str] = None):
        super().__init__(self.message)
        self.error = error


class MissingParameter(RelayError):
    status_code = 400
    message = "URL parameter is required"


class InvalidUrlShape(RelayError):
    status_code = 400
    message = "Invalid TikTok URL"


class UpstreamTimeout(RelayError):
    status_code = 408
    message = "Request timeout. Please try again."


class UpstreamRejected(RelayError):
    status_code = 404
    message = "Video not found or unable to process"


class UpstreamUnexpectedFailure(RelayError):
    status_code = 500
    message = "Failed to process video. Please try again later."


class RouteNotFound(RelayError):
    status_code = 404
    message = "Endpoint not found"


class InternalFault(RelayError):
    status_code = 500
    message = "Internal server error"
