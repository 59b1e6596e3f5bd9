import logging
from typing import Any, Dict, Optional, Tuple

import requests

from auth import (
    DEFAULT_TIMEOUT_SECONDS,
    ApiError,
    AuthError,
    ContractViolationError,
    TransportError,
)
from utils.api_response import format_error_messages

log = logging.getLogger(__name__)

REFRESH_FAILED_MESSAGE = "Failed to refresh access token"
USER_FETCH_FAILED_MESSAGE = "Failed to retrieve user data"
LOGIN_FAILED_MESSAGE = "Login response did not include an access token"


def _data_field(body: Any) -> Any:
    if isinstance(body, dict):
        return body.get("data")
    return None


def parse_token_response(body: Any, failure_message: str) -> str:
    """Schema for `{data: {access_token}}` responses of /refresh and /login."""
    data = _data_field(body)
    token = data.get("access_token") if isinstance(data, dict) else None
    if not token or not isinstance(token, str):
        raise ContractViolationError(failure_message)
    return token


def parse_user_response(body: Any) -> Dict[str, Any]:
    """Schema for `{data: UserProfile}` responses of /me; null data means no user."""
    data = _data_field(body)
    if data is None:
        message = body.get("message") if isinstance(body, dict) else None
        raise ContractViolationError(format_error_messages(message, default=USER_FETCH_FAILED_MESSAGE))
    if not isinstance(data, dict):
        raise ContractViolationError(USER_FETCH_FAILED_MESSAGE)
    return data


class AuthApiClient:
    """Calls the identity API.

    Requests that need the refresh cookie go through ``self.http`` (a
    ``requests.Session``), whose cookie jar stores whatever the server sets on
    /login and sends it back on /refresh and /me. Registration deliberately
    bypasses the jar.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http_session if http_session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(
        self,
        method: str,
        path: str,
        with_credentials: bool = True,
        bearer_token: Optional[str] = None,
        payload: Optional[dict] = None,
    ) -> Tuple[requests.Response, Any]:
        headers = {"Content-Type": "application/json"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"

        url = self._url(path)
        try:
            if with_credentials:
                resp = self.http.request(method, url, headers=headers, json=payload, timeout=self.timeout)
            else:
                resp = requests.request(method, url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"❌ Network error on {method} {path}: {e}")
            raise TransportError(f"Network error: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None
        return resp, body

    @staticmethod
    def _is_success(resp) -> bool:
        return 200 <= resp.status_code < 300

    def _raise_for_status(self, resp, body: Any, path: str) -> None:
        if self._is_success(resp):
            return
        if body is None:
            raise TransportError(
                f"Unreadable response from {path} (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )
        message = body.get("message") if isinstance(body, dict) else None
        raise ApiError(
            format_error_messages(message, default=f"Request failed with HTTP {resp.status_code}"),
            status_code=resp.status_code,
        )

    def _require_body(self, resp, body: Any, path: str) -> Any:
        if body is None:
            raise TransportError(
                f"Unreadable response from {path} (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )
        return body

    def refresh_access_token(self) -> str:
        try:
            resp, body = self._send("GET", "/refresh")
            self._raise_for_status(resp, body, "/refresh")
            return parse_token_response(self._require_body(resp, body, "/refresh"), REFRESH_FAILED_MESSAGE)
        except AuthError as e:
            log.info(f"Failed to refresh access token: {e.message}")
            raise

    def fetch_user(self, token: str) -> Dict[str, Any]:
        try:
            resp, body = self._send("POST", "/me", bearer_token=token)
            self._raise_for_status(resp, body, "/me")
            return parse_user_response(self._require_body(resp, body, "/me"))
        except AuthError as e:
            log.info(f"Failed to retrieve user data: {e.message}")
            raise

    def login(self, email: str, password: str) -> str:
        resp, body = self._send("POST", "/login", payload={"email": email, "password": password})
        self._raise_for_status(resp, body, "/login")
        return parse_token_response(self._require_body(resp, body, "/login"), LOGIN_FAILED_MESSAGE)

    def register(self, email: str, password: str, password_confirmation: str) -> bool:
        payload = {
            "email": email,
            "password": password,
            "password_confirmation": password_confirmation,
        }
        resp, body = self._send("POST", "/register", with_credentials=False, payload=payload)
        self._raise_for_status(resp, body, "/register")
        return True

    def clear_credentials(self) -> None:
        """Drop the refresh cookie and anything else the server set."""
        self.http.cookies.clear()
