"""
Shared request/response building blocks.

Requests arrive with camelCase keys (``fromStationId``); responses use
snake_case, matching the column names clients already rely on.
"""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Request body whose blank string values count as absent."""

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data):
        # HTML selects and inputs submit "" when nothing was chosen.
        if isinstance(data, dict):
            return {
                key: None if isinstance(value, str) and not value.strip() else value
                for key, value in data.items()
            }
        return data


class CamelRequest(RequestModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    success: bool
    message: str
