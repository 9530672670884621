from typing import Any, Dict, List, Type, TypeVar
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


def validate(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a request payload against a schema.

    A missing or non-JSON body is validated as an empty object so the
    caller gets the per-field "required" errors instead of a bare 400.
    Raises pydantic.ValidationError, turned into a 400 by the error handlers.
    """
    return schema.model_validate(data if data is not None else {})


def format_validation_errors(error: ValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "body",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


def changes(payload: BaseModel, nullable=()) -> Dict[str, Any]:
    """
    Fields the client actually sent, for partial updates. Explicit nulls
    are dropped unless the field is listed in `nullable`.
    """
    data = payload.model_dump(exclude_unset=True)
    return {
        field: value for field, value in data.items()
        if value is not None or field in nullable
    }
