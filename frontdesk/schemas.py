"""Pydantic schemas for request/response validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StaffMember(BaseModel):
    id: str
    profile: dict[str, Any] = Field(default_factory=dict)


class VisitorAnnouncement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    purpose: str
    staff_id: str = Field(alias="staffId")


class Attachment(BaseModel):
    color: str
    pretext: str
    text: str


class OperationResult(BaseModel):
    success: bool
    message: str
