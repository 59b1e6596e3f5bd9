from use_cases.session_models import Session, authenticated, is_authenticated, is_consistent, unauthenticated


def test_is_authenticated() -> None:
    assert is_authenticated(authenticated("t1", {"id": 1})) is True
    assert is_authenticated(unauthenticated()) is False
    assert is_authenticated(Session()) is False


def test_is_consistent() -> None:
    assert is_consistent(authenticated("t1", {"id": 1})) is True
    assert is_consistent(Session(status="FAILED")) is True
    assert is_consistent(Session(access_token="t1", status="AUTHENTICATING")) is False
    assert is_consistent(Session(access_token="t1", user=None, status="AUTHENTICATED")) is False


def test_user_profile_alias_has_single_home() -> None:
    from infrastructure.http import auth_api_client
    from use_cases import session_models

    assert hasattr(session_models, "UserProfile")
    assert not hasattr(auth_api_client, "UserProfile")
