"""Session lifecycle controller: login, registration, silent refresh and teardown.

The controller owns the only copy of the session. Consumers read it through
properties or ``snapshot()`` and change it only through the public operations;
``subscribe()`` delivers a ``SessionState`` after every change.

Operations that mutate the session are serialized by a re-entrant lock, so a
second ``login()`` issued while one is in flight waits for the first to finish
instead of interleaving writes. No partial session (a token without its user)
is ever stored: the session is replaced as one immutable value.
"""

import logging
import threading
from typing import Callable, List, Optional

from auth import AuthError
from use_cases.session_models import (
    OperationError,
    Session,
    SessionState,
    UserProfile,
    authenticated,
    is_authenticated,
    is_consistent,
    unauthenticated,
)

log = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class SessionController:
    def __init__(self, api_client, access_token: Optional[str] = None, listeners: Optional[List[Listener]] = None):
        self._api = api_client
        self._lock = threading.RLock()
        self._session = Session()
        self._pending_token = access_token
        self._error: Optional[OperationError] = None
        self._is_loading = True
        self._bootstrapped = False
        self._listeners: List[Listener] = list(listeners or [])
        self.bootstrap()

    # --- read-only surface ---

    @property
    def token(self) -> Optional[str]:
        return self._session.access_token

    @property
    def user(self) -> Optional[UserProfile]:
        return self._session.user

    @property
    def is_logged_in(self) -> bool:
        return is_authenticated(self._session)

    @property
    def status(self):
        return self._session.status

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> Optional[str]:
        return self._error.message if self._error is not None else None

    @property
    def last_error(self) -> Optional[OperationError]:
        return self._error

    def snapshot(self) -> SessionState:
        session = self._session
        return SessionState(
            token=session.access_token,
            user=session.user,
            is_logged_in=is_authenticated(session),
            error=self.error,
            is_loading=self._is_loading,
            status=session.status,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- state transitions ---

    def _notify(self) -> None:
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                log.exception("Session listener failed")

    def _apply(self, session: Session, is_loading: bool) -> None:
        if not is_consistent(session):
            raise ValueError(f"Inconsistent session for status {session.status}")
        previous = self._session.status
        self._session = session
        self._is_loading = is_loading
        if previous != session.status:
            log.info(f"Session status {previous} -> {session.status}")
        self._notify()

    def _begin(self, status: str) -> None:
        self._apply(Session(status=status), is_loading=True)

    def _set_session(self, token: str, user: UserProfile) -> None:
        self._apply(authenticated(token, user), is_loading=False)

    def reset_session(self) -> None:
        """Clear token and user; always ends UNAUTHENTICATED and not loading."""
        with self._lock:
            self._apply(unauthenticated(), is_loading=False)

    def reset_error(self) -> None:
        with self._lock:
            if self._error is None:
                return
            self._error = None
            self._notify()

    def _fail(self, exc: AuthError) -> None:
        self._error = OperationError(message=exc.message, cause=exc)
        self._apply(Session(status="FAILED"), is_loading=False)
        self.reset_session()

    # --- network operations ---

    def refresh_access_token(self) -> str:
        return self._api.refresh_access_token()

    def fetch_user(self, token: str) -> UserProfile:
        return self._api.fetch_user(token)

    def bootstrap(self) -> None:
        """Silent re-authentication; runs once per controller and never sets ``error``."""
        with self._lock:
            if self._bootstrapped:
                log.warning("Session bootstrap already ran; ignoring repeated call")
                return
            self._bootstrapped = True

            self._begin("AUTHENTICATING")
            try:
                token = self._pending_token or self.refresh_access_token()
                self._pending_token = None
                if not token:
                    raise AuthError("Failed to refresh access token")
                user = self.fetch_user(token)
            except AuthError as e:
                log.warning(f"⚠️ Silent re-authentication failed: {e.message}")
                self.reset_session()
                return
            except Exception:
                log.exception("❌ Silent re-authentication crashed")
                self.reset_session()
                return
            self._set_session(token, user)

    def login(self, email: str, password: str) -> None:
        with self._lock:
            # A signed-in session stays in place until the new one is confirmed
            if self.is_logged_in:
                self._is_loading = True
                self._notify()
            else:
                self._begin("AUTHENTICATING")
            try:
                token = self._api.login(email, password)
                user = self.fetch_user(token)
            except AuthError as e:
                log.error(f"❌ Login error: {e.message}")
                self._fail(e)
                raise
            self._set_session(token, user)

    def register(self, email: str, password: str, password_confirmation: str) -> bool:
        with self._lock:
            self._is_loading = True
            self._notify()
            try:
                self._api.register(email, password, password_confirmation)
            except AuthError as e:
                log.error(f"❌ Register error: {e.message}")
                self._fail(e)
                raise
            self._is_loading = False
            self._notify()
            return True

    def logout(self) -> None:
        with self._lock:
            self._api.clear_credentials()
            self.reset_session()
