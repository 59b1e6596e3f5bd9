from unittest.mock import patch

from use_cases import auth_flow, bootstrap


def test_auth_flow_contract() -> None:
    assert hasattr(auth_flow, "ensure_authenticated_session")
    auth_flow.session_manager.st.session_state.clear()
    result = auth_flow.ensure_authenticated_session()
    assert isinstance(result, auth_flow.AuthFlowResult)
    assert result.status in {"CONTINUE", "STOP"}


@patch("use_cases.bootstrap.SessionController")
@patch("use_cases.bootstrap.auth.get_auth_api_endpoint", return_value="https://id.example.com")
@patch("use_cases.bootstrap.auth.get_request_timeout", return_value=10.0)
def test_bootstrap_contract(_, __, ___) -> None:
    assert hasattr(bootstrap, "run_startup")
    bootstrap.session_manager.st.session_state.clear()
    result = bootstrap.run_startup()
    assert isinstance(result, bootstrap.StartupResult)
    assert result.status in {"CONTINUE", "STOP"}
    assert isinstance(result.planned_steps, tuple)
