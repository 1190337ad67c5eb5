"""
Base schema: snake_case in Python, camelCase on the wire.
"""

from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Primary keys are int4 columns
MAX_DB_ID = 2**31 - 1

DbId = Annotated[int, Field(gt=0, le=MAX_DB_ID)]


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
