# services/auth_service.py
# Login / signup pass-through. Status only: no tokens, no sessions.
import logging
from typing import Any, Dict

import requests

from core.config import LOGIN_URL, SIGNUP_URL
from core.http_client import http_post, is_2xx
from models.forms import AuthOutcome, LoginForm, SignupForm
from texts import ui_en as T

def _post_status(url: str, payload: Dict[str, Any], ok_text: str, fail_text: str, tag: str) -> AuthOutcome:
    try:
        r = http_post(url, payload)
    except requests.RequestException as e:
        logging.warning(f"[auth] {tag} request failed: {type(e).__name__}: {e}")
        return AuthOutcome(ok=False, message=fail_text)
    if is_2xx(r):
        return AuthOutcome(ok=True, message=ok_text, status_code=r.status_code)
    logging.info(f"[auth] {tag} refused: HTTP {r.status_code}")
    return AuthOutcome(ok=False, message=fail_text, status_code=r.status_code)

def login(form: LoginForm) -> AuthOutcome:
    payload = {"email": form.email, "password": form.password}
    return _post_status(LOGIN_URL, payload, T.LOGIN_OK, T.LOGIN_FAILED, "login")

def signup(form: SignupForm) -> AuthOutcome:
    # passwords must match before anything is posted
    if form.password != form.confirm_password:
        return AuthOutcome(ok=False, message=T.PASSWORD_MISMATCH)
    payload = {
        "name": form.name,
        "email": form.email,
        "phone": form.phone,
        "city": form.city,
        "password": form.password,
    }
    return _post_status(SIGNUP_URL, payload, T.SIGNUP_OK, T.SIGNUP_FAILED, "signup")
