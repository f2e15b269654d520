from pydantic import BaseModel, EmailStr, Field, field_validator

EMAIL_MAX_LENGTH = 100


class RegisterRequest(BaseModel):
    """Body of POST /api/auth/registrar."""
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, value: str) -> str:
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters.")
        return value


class LoginRequest(BaseModel):
    """Body of POST /api/auth/login."""
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
