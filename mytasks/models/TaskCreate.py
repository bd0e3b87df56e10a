from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class TaskCreate(BaseModel):
    title: str = ""
    description: Optional[str] = None
    location: str = ""
    date: Optional[datetime] = None

    @field_validator("title", "location", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        # null and scalars reach the inline check instead of a pydantic error list
        if value is None:
            return ""
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    def validation_error(self) -> Optional[str]:
        """Inline form error, or None when the task may be saved."""
        if not self.title.strip():
            return "Title field is required."
        if not self.location.strip():
            return "Location field is required."
        return None
