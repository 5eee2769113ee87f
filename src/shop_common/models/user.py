"""User models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Validated input for a new user."""

    first_name: str = Field(..., alias="firstName", description="First name of the user")
    last_name: str = Field(..., alias="lastName", description="Last name of the user")
    email: EmailStr = Field(..., description="Email address of the user")

    model_config = ConfigDict(populate_by_name=True)


class User(BaseModel):
    """User entity model as stored.

    Stored documents are only required to have the fields, so ``email`` is
    read back as a plain string.
    """

    id: str = Field(..., description="Unique identifier for the user")
    first_name: str = Field(..., alias="firstName", description="First name of the user")
    last_name: str = Field(..., alias="lastName", description="Last name of the user")
    email: str = Field(..., description="Email address of the user")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "1f0c5d0e-8a54-4b4e-9a43-6d1b0f3f0c2a",
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane.doe@example.com",
            }
        },
    )
