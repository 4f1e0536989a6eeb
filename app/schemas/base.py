"""Shared schema configuration: camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
    }


class MessageResponse(BaseModel):
    message: str
