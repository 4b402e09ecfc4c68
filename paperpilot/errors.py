"""
Error taxonomy shared by the service layer and the HTTP layer.

Each error carries the HTTP status it maps to and a public message.
Only upstream failures expose ``details`` to API clients.
"""

from __future__ import annotations

from typing import Optional


class PaperPilotError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


# 400

class ValidationError(PaperPilotError):
    status_code = 400
    default_message = "Invalid request"


class MissingQueryError(ValidationError):
    default_message = "Search query is required"


class NoInterestsError(ValidationError):
    default_message = "No interests found"


# 401

class AuthError(PaperPilotError):
    status_code = 401
    default_message = "Invalid token"


# 404

class NotFoundError(PaperPilotError):
    status_code = 404
    default_message = "Not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


# 500

class UpstreamError(PaperPilotError):
    status_code = 500
    default_message = "Upstream service failed"


class StoreError(UpstreamError):
    default_message = "Database operation failed"


class OptimizationError(UpstreamError):
    default_message = "AI processing failed"


class ProviderError(UpstreamError):
    default_message = "Paper search failed"
