import streamlit as st

from use_cases.session_models import SessionState

"""
SESSION STATE CONTRACT

Streamlit-side storage for the auth session. The SessionController is the
single owner of session data; the mirrored keys below are written only by
`_mirror_state` and are read-only for views.

Keys in st.session_state:

session_controller: SessionController | None
    controller for this browser session
    default: None
    owner: session_manager

auth_user: dict | None
    profile of the authenticated user
    default: None
    owner: session_controller (mirror)

auth_token: str | None
    in-memory access token
    default: None
    owner: session_controller (mirror)

is_logged_in: bool
    default: False
    owner: session_controller (mirror)

auth_error: str | None
    last login/register error message
    default: None
    owner: session_controller (mirror)

auth_loading: bool
    True while a session operation is in flight
    default: True
    owner: session_controller (mirror)
"""

MIRRORED_DEFAULTS = {
    "auth_user": None,
    "auth_token": None,
    "is_logged_in": False,
    "auth_error": None,
    "auth_loading": True,
}


def init_session_state():
    if "session_controller" not in st.session_state:
        st.session_state.session_controller = None
    for key, default in MIRRORED_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = default


def _mirror_state(state: SessionState):
    st.session_state.auth_user = state.user
    st.session_state.auth_token = state.token
    st.session_state.is_logged_in = state.is_logged_in
    st.session_state.auth_error = state.error
    st.session_state.auth_loading = state.is_loading


def get_controller():
    return st.session_state.get("session_controller")


def attach_controller(controller):
    st.session_state.session_controller = controller
    controller.subscribe(_mirror_state)
    _mirror_state(controller.snapshot())
    return controller


def logout():
    controller = get_controller()
    if controller is not None:
        controller.logout()
    st.rerun()
