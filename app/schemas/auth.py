from pydantic import BaseModel, constr
from typing import Optional


class SignupRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: constr(min_length=6, max_length=128)
    name: constr(strip_whitespace=True, min_length=1, max_length=100)
    shop_name: Optional[constr(max_length=100)] = None
    location: Optional[constr(max_length=150)] = None
    city: Optional[constr(max_length=100)] = None
    phone: Optional[constr(pattern=r"^\d{10}$")] = None


class LoginRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)
