"""Pydantic models for validating documents."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigFileCreate(BaseModel):
    """Validate config file creation payloads."""

    config_id: str = Field(min_length=1, description="Unique config file ID")
    content: str = Field(description="Raw text content")
    name: Optional[str] = None
    comment: Optional[str] = None
    provider_id: Optional[str] = None

    @field_validator("config_id")
    @classmethod
    def _no_surrounding_whitespace(cls, value: str) -> str:
        if value != value.strip() or not value.strip():
            raise ValueError("config_id must be non-blank without surrounding whitespace")
        return value


class ParameterDocument(BaseModel):
    """Validate one persisted parameter entry.

    Missing ``config_file_id`` and blank ``choice_type`` are accepted so that
    parameter sets written before those fields existed still load.
    """

    model_config = ConfigDict(extra="ignore")

    type: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = ""
    choice_type: Optional[str] = None
    filterable: Optional[bool] = None
    config_file_id: Optional[str] = None
    filter_length: Optional[int] = None
    visible_item_count: Optional[int] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value
