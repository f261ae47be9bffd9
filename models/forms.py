# models/forms.py
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field

# ---------- report form (what the page posts to us) ----------

class ReportForm(BaseModel):
    type: str = ""
    description: str = ""
    severity: Any = "low"                     # label or 1..4; sent on as a label
    lat: Any = ""                             # auto-filled by geocoding, may stay blank
    lng: Any = ""
    city: str = ""
    area: str = ""
    landmark: str = ""

class FormMessage(BaseModel):
    text: str
    type: Literal["success", "error"]

class SubmitOutcome(BaseModel):
    ok: bool
    message: FormMessage
    form: ReportForm                          # kept as entered on error, blank on success
    created: Optional[Any] = None             # backend echo of the new record

class GeocodeFill(BaseModel):
    query: str
    lat: str = ""
    lng: str = ""
    label: Optional[str] = None
    found: bool = False

# ---------- auth pass-through ----------

class LoginForm(BaseModel):
    email: str = Field(..., min_length=3, max_length=256)
    password: str = Field(..., min_length=1, max_length=256)

class SignupForm(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    email: str = Field(..., min_length=3, max_length=256)
    phone: str = ""
    city: str = ""
    password: str = Field(..., min_length=1, max_length=256)
    confirm_password: str = Field(..., min_length=1, max_length=256)

class AuthOutcome(BaseModel):
    ok: bool
    message: str
    status_code: Optional[int] = None         # backend status, None when unreachable
