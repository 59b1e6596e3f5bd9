"""Application layer contracts for orchestrating high-level flows."""

from .auth_flow import AuthFlowResult, AuthFlowStatus, ensure_authenticated_session
from .bootstrap import StartupResult, StartupStatus, run_startup
from .session_controller import SessionController
from .session_models import OperationError, Session, SessionState, SessionStatus, UserProfile

__all__ = [
    "AuthFlowResult",
    "AuthFlowStatus",
    "OperationError",
    "Session",
    "SessionController",
    "SessionState",
    "SessionStatus",
    "StartupResult",
    "StartupStatus",
    "UserProfile",
    "ensure_authenticated_session",
    "run_startup",
]
