import os
from typing import Optional

import streamlit as st

DEFAULT_TIMEOUT_SECONDS = 10.0


class AuthError(Exception):
    """Base class for every failed session operation."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(AuthError):
    """Network or parsing failure before a structured response was obtained."""


class ApiError(AuthError):
    """Structured non-success response carrying a server message."""


class ContractViolationError(AuthError):
    """Success status, but an expected field is missing or invalid."""


class ConfigurationError(Exception):
    pass


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None


def _get_setting(key):
    return get_secret(key) or os.getenv(key)


def get_auth_api_endpoint() -> str:
    endpoint = _get_setting("AUTH_API_ENDPOINT")
    if not endpoint:
        raise ConfigurationError("AUTH_API_ENDPOINT is not configured")
    return str(endpoint).rstrip("/")


def get_request_timeout() -> float:
    raw = _get_setting("AUTH_API_TIMEOUT")
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"AUTH_API_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError("AUTH_API_TIMEOUT must be positive")
    return timeout
