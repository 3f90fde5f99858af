"""
Schema layer adapter: validates raw tool arguments against pydantic
input models and reports every failing field at once.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import FieldError, ToolValidationError

M = TypeVar("M", bound=BaseModel)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def _loc_to_path(loc: tuple[Any, ...]) -> str:
  return ".".join(str(part) for part in loc)


def field_errors(exc: ValidationError) -> list[FieldError]:
  """Flatten a pydantic ValidationError into (path, reason) pairs."""
  errors: list[FieldError] = []
  for err in exc.errors():
    msg = err.get("msg", "invalid value")
    # model_validator failures have an empty location
    errors.append(FieldError(path=_loc_to_path(err.get("loc", ())), reason=msg))
  return errors


def as_tool_validation_error(tool_name: str, exc: ValidationError) -> ToolValidationError:
  return ToolValidationError(tool_name, field_errors(exc))


def validate_arguments(tool_name: str, model: type[M], args: dict[str, Any]) -> M:
  """Validate and default raw arguments. Raises ToolValidationError."""
  try:
    return model.model_validate(args)
  except ValidationError as exc:
    raise as_tool_validation_error(tool_name, exc) from exc


def input_schema(model: type[BaseModel]) -> dict[str, Any]:
  """JSON Schema for a tool's input model, tagged with its dialect."""
  schema = model.model_json_schema()
  return {"$schema": JSON_SCHEMA_DIALECT, **schema}


def strip_dialect(schema: dict[str, Any]) -> dict[str, Any]:
  """Copy of schema without the $schema key, which some clients reject."""
  return {k: v for k, v in schema.items() if k != "$schema"}
