"""Request bodies for the REST backend (camelCase on the wire)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ClientCreate(CamelModel):
    name: str
    email: str = ""
    phone: str = ""

    @field_validator("name", "email", "phone")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be blank")
        return value


class ReviewRequestCreate(CamelModel):
    """Body of POST /review-requests. Missing client/platform is reported as incomplete selection."""
    client_id: Optional[int] = Field(default=None, alias="clientId")
    client_name: str = Field(default="", alias="clientName")
    client_email: str = Field(default="", alias="clientEmail")
    platform: Optional[str] = None
    custom_message: Optional[str] = Field(default=None, alias="customMessage")


class StatusUpdate(CamelModel):
    status: str


class OutreachSend(CamelModel):
    client_id: Optional[int] = Field(default=None, alias="clientId")
    platform: Optional[str] = None
    message: Optional[str] = None
