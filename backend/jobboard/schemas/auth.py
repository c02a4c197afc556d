from pydantic import BaseModel

from jobboard.models.enums import Role
from jobboard.schemas.base import CamelModel


class Identity(BaseModel):
    subject_id: str
    role: Role


class RegisterRequest(CamelModel):
    email: str | None = None
    password: str | None = None
    user_type: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    country: str | None = None
    # role-specific extras
    location: str | None = None
    company_name: str | None = None


class LoginRequest(CamelModel):
    email: str
    password: str


class AccountResponse(CamelModel):
    id: str
    email: str
    user_type: str
    first_name: str
    last_name: str
    country: str


class RegisterResponse(CamelModel):
    message: str
    user: AccountResponse
