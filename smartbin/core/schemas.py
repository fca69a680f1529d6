from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class ApiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

class SuccessOut(ApiModel):
    success: bool = True
