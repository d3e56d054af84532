from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

import config
from profiles import PROFILE_NAMES

class ValuePayload(BaseModel):
    """Request model carrying one numeral, one token, or a delimited list."""
    value: str = Field(..., max_length=config.MAX_INPUT_LENGTH)

class ValueResponse(BaseModel):
    """Response model for every encode, decode and reformat operation."""
    result: str
    profile: Optional[str] = None

class ProfilePayload(BaseModel):
    """Request model for switching the active profile."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    def strip_name(cls, v):
        return v.strip()

class ProfileResponse(BaseModel):
    name: str
    available: tuple[str, ...] = PROFILE_NAMES

class PrefixPayload(BaseModel):
    enabled: bool

class PrefixResponse(BaseModel):
    enabled: bool

class ErrorResponse(BaseModel):
    """Error body returned for every rejected request."""
    detail: str
    error: Literal[
        "EmptyInput", "InvalidNumericInput", "InvalidCiphertext",
        "LengthTooShort", "ConfigurationError", "InternalError",
    ]
