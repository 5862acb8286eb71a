# mylife/schemas/base.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List

class CamelModel(BaseModel):
    # snake_case attributes, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class BaseResponse(CamelModel):
    message: str
    is_success: bool
    status_code: int
    errors: List[str] = Field(default_factory=list)
