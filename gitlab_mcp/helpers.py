"""
Shared helpers for handlers: argument-to-query conversion, response
parsing and rendering handler results into MCP content.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, TypeAdapter

M = TypeVar("M", bound=BaseModel)


# ---------------------------------------------------------------------------
# Arguments / responses
# ---------------------------------------------------------------------------


def query(args: BaseModel, *exclude: str) -> dict[str, Any]:
  """Set, non-path fields of a validated input model as request values."""
  return args.model_dump(exclude_none=True, exclude=set(exclude))


def join_labels(labels: list[str] | None) -> str | None:
  return ",".join(labels) if labels is not None else None


def parse(model: type[M], data: Any) -> M:
  return model.model_validate(data)


def parse_list(model: type[M], data: Any) -> list[M]:
  return TypeAdapter(list[model]).validate_python(data or [])


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def to_jsonable(value: Any) -> Any:
  """Dump pydantic models (and lists of them) to plain JSON values."""
  if isinstance(value, BaseModel):
    return value.model_dump(mode="json", exclude_unset=True)
  if isinstance(value, (list, tuple)):
    return [to_jsonable(v) for v in value]
  if isinstance(value, dict):
    return {k: to_jsonable(v) for k, v in value.items()}
  return value


def render_json(value: Any) -> str:
  return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False)


def text_envelope(text: str) -> CallToolResult:
  return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_envelope(text: str) -> CallToolResult:
  return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


def deleted(what: str) -> dict[str, str]:
  """Standard payload for delete tools."""
  return {"status": "success", "message": f"{what} deleted successfully"}
