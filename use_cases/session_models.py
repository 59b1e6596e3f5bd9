"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

SessionStatus = Literal["INITIALIZING", "AUTHENTICATING", "AUTHENTICATED", "UNAUTHENTICATED", "FAILED"]

UserProfile = Dict[str, Any]


@dataclass(frozen=True)
class Session:
    access_token: Optional[str] = None
    user: Optional[UserProfile] = None
    status: SessionStatus = "INITIALIZING"


@dataclass(frozen=True)
class OperationError:
    message: str
    cause: Optional[BaseException] = None


@dataclass(frozen=True)
class SessionState:
    """Read-only view handed to consumers and listeners."""

    token: Optional[str]
    user: Optional[UserProfile]
    is_logged_in: bool
    error: Optional[str]
    is_loading: bool
    status: SessionStatus


def authenticated(token: str, user: UserProfile) -> Session:
    return Session(access_token=token, user=user, status="AUTHENTICATED")


def unauthenticated() -> Session:
    return Session(status="UNAUTHENTICATED")


def is_authenticated(session: Session) -> bool:
    return session.status == "AUTHENTICATED"


def is_consistent(session: Session) -> bool:
    """User, token and AUTHENTICATED status are present together or not at all."""
    has_token = session.access_token is not None
    has_user = session.user is not None
    return has_token == has_user == is_authenticated(session)
