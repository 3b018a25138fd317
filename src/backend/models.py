"""
Backend record models
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.core.constants import DEFAULT_FIRST_NAME, DEFAULT_LAST_NAME


class Citizen(BaseModel):
    """Citizen account as returned by the auth collection endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    username: Optional[str] = None
    first_name: str = Field(default=DEFAULT_FIRST_NAME, alias="firstName")
    last_name: str = Field(default=DEFAULT_LAST_NAME, alias="lastName")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Some backends serialize ids as numbers
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _default_null_names(cls, value: Any, info: ValidationInfo) -> Any:
        # Backends send null for names that were never filled in
        if value is None:
            return DEFAULT_FIRST_NAME if info.field_name == "first_name" else DEFAULT_LAST_NAME
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
