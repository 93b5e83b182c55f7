"""
Shared Pydantic base for API schemas.

The dashboard speaks camelCase JSON (examScore, applicationId, ...); fields
are declared in snake_case and aliased. Input accepts either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
