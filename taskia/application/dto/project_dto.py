"""
Project DTO
===========

Pydantic models for project API requests and responses.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from taskia.application.dto.validators import ObjectiveStr, OptionalText, check_schedule
from taskia.domain.constants.project_status import ProjectStatus
from taskia.domain.models.project import Project

INVALID_STATUS_MESSAGE = f"Invalid status. Use: {', '.join(ProjectStatus.REQUESTABLE)}"


class CreateProjectRequest(BaseModel):
    """DTO for creating a project."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Onboarding revamp",
                "objective": "Cut first-week drop-off in half",
                "description": "Rework the onboarding flow end to end.",
                "status": "Draft",
                "start_date": "2026-01-05",
                "end_date": "2026-03-31",
                "user_id": "3f1c2a9e-5b7d-4e0a-9c1f-2d6b8e4a7c10",
            }
        },
    )

    name: str = Field(..., min_length=1, max_length=200)
    objective: ObjectiveStr = None
    description: OptionalText = None
    status: str = Field(ProjectStatus.DRAFT, description="Draft, Active, Paused, Completed or Cancelled")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    user_id: str = Field(..., min_length=1, description="Owning user; must exist and be active")

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return ProjectStatus.DRAFT
        return value

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        if value not in ProjectStatus.REQUESTABLE:
            raise ValueError(INVALID_STATUS_MESSAGE)
        return value

    @model_validator(mode="after")
    def validate_schedule(self) -> "CreateProjectRequest":
        check_schedule(self.start_date, self.end_date)
        return self


class UpdateProjectRequest(BaseModel):
    """DTO for updating a project. The owning user cannot change."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[str] = Field(None, description="Must match the path ID when sent")
    name: str = Field(..., min_length=1, max_length=200)
    objective: ObjectiveStr = None
    description: OptionalText = None
    status: str = Field(..., min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        if value not in ProjectStatus.REQUESTABLE:
            raise ValueError(INVALID_STATUS_MESSAGE)
        return value

    @model_validator(mode="after")
    def validate_schedule(self) -> "UpdateProjectRequest":
        check_schedule(self.start_date, self.end_date)
        return self


class ProjectDto(BaseModel):
    """DTO for project data, including the owner's name."""
    id: str
    name: str
    objective: Optional[str] = None
    description: Optional[str] = None
    status: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    user_id: str
    user_name: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectDto":
        return cls(
            id=project.id,
            name=project.name,
            objective=project.objective,
            description=project.description,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
            user_id=project.user_id,
            user_name=project.user_name,
            is_active=project.is_active,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
