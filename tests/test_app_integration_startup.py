import sys
import importlib
from unittest.mock import patch, MagicMock
import pytest
import streamlit as st

from use_cases.bootstrap import StartupResult
from use_cases.auth_flow import AuthFlowResult


@patch("use_cases.bootstrap.run_startup")
@patch("use_cases.auth_flow.ensure_authenticated_session")
@patch("views.login_view.render_auth_screen")
def test_app_startup_headless_integration(
    mock_render_auth,
    mock_ensure_auth,
    mock_run_startup,
):
    st.session_state.clear()
    st.session_state.session_controller = MagicMock(error=None)
    st.session_state.auth_user = {"id": 1, "name": "Test User"}

    mock_run_startup.return_value = StartupResult(status="CONTINUE", planned_steps=())
    mock_ensure_auth.return_value = AuthFlowResult(status="CONTINUE", user_id=1, reason="authenticated")

    if "app" in sys.modules:
        del sys.modules["app"]

    try:
        importlib.import_module("app")
    except Exception as e:
        pytest.fail(f"app.py import failed with error: {e}")

    mock_ensure_auth.assert_called_once()
    mock_run_startup.assert_called_once()
    mock_render_auth.assert_not_called()
