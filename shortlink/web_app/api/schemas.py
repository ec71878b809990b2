"""Pydantic schemas for API requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ...lib.common.validators import is_valid_url


STATUS_OK = "Ok"
STATUS_ERROR = "Error"

# Field names as they appear in validation error messages
FIELD_NAMES = {
    "url": "URL",
    "alias": "Alias",
}


class SaveRequest(BaseModel):
    """Request to save a URL under an alias."""

    url: Optional[str] = Field(..., description="The URL to shorten")
    alias: Optional[str] = Field(None, description="Optional alias; generated when omitted")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: Optional[str]) -> str:
        """Validate URL format."""
        if not v:
            raise PydanticCustomError('required', 'URL is required')
        is_valid, error = is_valid_url(v)
        if not is_valid:
            raise PydanticCustomError('url', error)
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                },
                {
                    "url": "https://github.com/user/repo",
                    "alias": "myrepo"
                }
            ]
        }
    }


class Response(BaseModel):
    """Status envelope shared by every API response."""

    status: str = Field(..., description="Ok or Error")
    error: Optional[str] = Field(None, description="Error message when status is Error")


class SaveResponse(Response):
    """Response after saving a URL."""

    alias: Optional[str] = Field(None, description="The alias the URL was saved under")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "Ok", "alias": "aZ3kQ9"},
                {"status": "Error", "error": "url already exists"},
            ]
        }
    }


def ok(alias: str) -> SaveResponse:
    return SaveResponse(status=STATUS_OK, alias=alias)


def error(message: str) -> SaveResponse:
    return SaveResponse(status=STATUS_ERROR, error=message)


def validation_error(exc: ValidationError) -> SaveResponse:
    """Build an error response listing every failed field.

    Args:
        exc: Validation error raised while parsing the request

    Returns:
        Error response, messages joined with ", "
    """
    messages: List[str] = []

    for err in exc.errors():
        loc = err["loc"][0] if err["loc"] else ""
        field = FIELD_NAMES.get(str(loc), str(loc))
        if err["type"] in ("missing", "required"):
            messages.append(f"field {field} is a required field")
        elif err["type"] == "url":
            messages.append(f"field {field} is not a valid URL")
        else:
            messages.append(f"field {field} is not valid")

    return error(", ".join(messages))
