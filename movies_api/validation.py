from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from .exceptions import MovieValidationError
from .schemas.movie import MovieCreate, MovieUpdate


def _field_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    errors = []
    for err in exc.errors(include_url=False):
        loc = [str(part) for part in err["loc"]]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": err["msg"],
            "type": err["type"],
        })
    return errors


def _validate(model: Type[BaseModel], payload: Any, **dump_options) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise MovieValidationError([{
            "field": "body",
            "message": "Movie payload must be a JSON object",
            "type": "model_type",
        }])
    try:
        data = model.model_validate(payload)
    except ValidationError as exc:
        raise MovieValidationError(_field_errors(exc)) from exc
    return data.model_dump(mode="json", **dump_options)


def validate_movie(payload: Any) -> Dict[str, Any]:
    """Full validation for a new movie. Returns normalized JSON-ready data."""
    return _validate(MovieCreate, payload)


def validate_partial_movie(payload: Any) -> Dict[str, Any]:
    """Partial validation for an update. Returns only the fields that were sent."""
    return _validate(MovieUpdate, payload, exclude_unset=True)
