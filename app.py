import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

from utils import session_manager
from use_cases import auth_flow, bootstrap
from views import login_view

st.set_page_config(page_title="Account", layout="centered")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok"})
    st.stop()

# --- STARTUP ORCHESTRATION ---
with st.spinner("Checking session..."):
    startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.error("🚨 AUTH_API_ENDPOINT is not configured.")
    st.stop()

# --- AUTH GATE ---
auth_result = auth_flow.ensure_authenticated_session()

if auth_result.reason == "loading":
    st.info("Checking session...")
    st.stop()

if auth_result.status == "STOP":
    login_view.render_auth_screen()
    st.stop()

# === PROTECTED AREA ===
user = st.session_state.auth_user or {}

try:
    import sentry_sdk
    if sentry_sdk.get_client().is_active():
        sentry_sdk.set_user({"id": user.get("id")})
except (ImportError, AttributeError):
    pass

st.title(f"👋 {user.get('name') or user.get('email') or 'Signed in'}")

with st.sidebar:
    if st.button("Sign out", key="logout_btn", type="secondary"):
        session_manager.logout()

login_view.render_error_banner(session_manager.get_controller())
st.json(user)
