import streamlit as st

import auth
from utils import session_manager


def render_error_banner(controller):
    if controller.error is None:
        return
    col_msg, col_btn = st.columns([5, 1])
    col_msg.error(controller.error)
    if col_btn.button("✖", key="dismiss_auth_error", help="Dismiss"):
        controller.reset_error()
        st.rerun()


def render_auth_screen():
    controller = session_manager.get_controller()
    if controller is None:
        st.error("Authentication service is unavailable.")
        return

    st.title("🔐 Sign in")
    render_error_banner(controller)

    tab_login, tab_register = st.tabs(["Sign in", "Register"])

    with tab_login:
        with st.form("login_form", clear_on_submit=False):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign in")
            if submitted:
                try:
                    controller.login(email.strip(), password)
                    st.rerun()
                except auth.AuthError:
                    # Message is already stored on the controller
                    st.rerun()

    with tab_register:
        with st.form("register_form", clear_on_submit=True):
            email = st.text_input("Email *")
            password = st.text_input("Password *", type="password")
            password_confirm = st.text_input("Confirm password *", type="password")
            submitted = st.form_submit_button("Register")
            if submitted:
                try:
                    controller.register(email.strip(), password, password_confirm)
                    st.success("Account created. You can sign in now.")
                except auth.AuthError:
                    st.rerun()
