from pydantic import Field

from api.common import CamelModel


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=3, description="Admin email address")
    password: str = Field(..., min_length=1, description="Admin password")


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, description="New password, at least 6 characters")
