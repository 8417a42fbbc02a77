"""Pydantic models describing candidate config locations."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class CandidateSource(str, Enum):
    """Where a candidate config path comes from, in probe order."""
    ENV = "env"
    USER_CONFIG = "user_config"
    ETC = "etc"
    USR_LOCAL_ETC = "usr_local_etc"
    USER_PREFERENCES = "user_preferences"
    SYSTEM_PREFERENCES = "system_preferences"


class CandidateProbe(BaseModel):
    """One probed candidate: its template, expansion and whether a file is there."""
    source: CandidateSource = Field(..., description="Origin of the candidate path")
    template: str = Field(..., description="Path before home-directory expansion")
    path: Optional[str] = Field(default=None, description="Expanded path, None if the home directory is unknown")
    exists: bool = Field(default=False, description="True if the expanded path is an existing file")

    class Config:
        """Pydantic config."""
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "source": "etc",
                "template": "/etc/my-app/config.toml",
                "path": "/etc/my-app/config.toml",
                "exists": True,
            }
        }
