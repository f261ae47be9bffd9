# routers/auth.py
from fastapi import APIRouter

from models.forms import AuthOutcome, LoginForm, SignupForm
from services import auth_service

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=AuthOutcome)
def login(form: LoginForm):
    return auth_service.login(form)

@router.post("/signup", response_model=AuthOutcome)
def signup(form: SignupForm):
    return auth_service.signup(form)
