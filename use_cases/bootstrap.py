"""Startup orchestration: session state and the silent re-authentication."""

from dataclasses import dataclass
from typing import Literal, Tuple

import logging

import auth
from infrastructure.http.auth_api_client import AuthApiClient
from use_cases.session_controller import SessionController
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def build_api_client() -> AuthApiClient:
    return AuthApiClient(auth.get_auth_api_endpoint(), timeout=auth.get_request_timeout())


def run_startup() -> StartupResult:
    """Create the session controller once per browser session."""
    executed_steps = []

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    # Controller already exists for this browser session: bootstrap ran on creation.
    if session_manager.get_controller() is not None:
        return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))

    try:
        client = build_api_client()
    except auth.ConfigurationError as e:
        log.error(f"❌ Auth API is not configured: {e}")
        executed_steps.append("missing_auth_config")
        return StartupResult(status="STOP", planned_steps=tuple(executed_steps))
    executed_steps.append("build_api_client")

    session_manager.attach_controller(SessionController(client))
    executed_steps.append("create_session_controller")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
