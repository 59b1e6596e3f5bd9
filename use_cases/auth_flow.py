"""Authentication flow orchestration (application layer)."""

from dataclasses import dataclass
from typing import Any, Literal, Optional

from utils import session_manager

AuthFlowStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for auth flow orchestration."""

    status: AuthFlowStatus
    reason: str
    user_id: Optional[Any] = None


def ensure_authenticated_session() -> AuthFlowResult:
    """Run the auth gate and return a control-flow status."""
    session_manager.init_session_state()

    controller = session_manager.get_controller()
    if controller is None:
        return AuthFlowResult(status="STOP", reason="auth_required")

    # Protected content must not render while an operation is in flight.
    if controller.is_loading:
        return AuthFlowResult(status="STOP", reason="loading")

    if not controller.is_logged_in:
        return AuthFlowResult(status="STOP", reason="auth_required")

    user = controller.user or {}
    return AuthFlowResult(status="CONTINUE", reason="authenticated", user_id=user.get("id"))
