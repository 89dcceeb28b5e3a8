"""
User Pydantic Schemas

- UserDTO: credentials for both register and login
- UserResponse: public account data (never exposes the password)
- TokenResponse: the login result
"""

from pydantic import EmailStr, Field

from bookstore.schemas.shared import CamelModel


class UserDTO(CamelModel):
    """
    E-mail and password pair.

    The password length window (6 to 10 characters) is enforced on
    both register and login.
    """

    email_address: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["customer@bookstore.com"],
    )

    password: str = Field(
        ...,
        min_length=6,
        max_length=10,
        description="Password, 6 to 10 characters",
        examples=["P@ssw0rd"],
    )


class UserResponse(CamelModel):
    """Account data returned after registration."""

    id: int = Field(..., description="Unique user identifier")
    email: EmailStr = Field(..., description="User's email address")
    roles: list[str] = Field(
        default_factory=list,
        description="Roles granted to the user",
    )


class TokenResponse(CamelModel):
    """
    Login result.

    Send the token back as "Authorization: Bearer <accessToken>".
    """

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
