"""Role-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    """Schema for creating a role."""

    name: str = Field(..., min_length=2, max_length=64, description="Unique role name")


class RoleResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoleSummary(BaseModel):
    """Minimal role reference embedded in member listings."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
