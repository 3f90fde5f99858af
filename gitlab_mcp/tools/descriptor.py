"""ToolDescriptor: the static declaration of one cataloged tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mcp.types import Tool
from pydantic import BaseModel

from ..validation import input_schema, strip_dialect

OutputForm = Literal["json", "text"]


@dataclass(frozen=True)
class ToolDescriptor:
  name: str
  description: str
  input_model: type[BaseModel]
  # "text" handlers return a plain string that is passed through unserialized
  output: OutputForm = "json"

  @property
  def input_schema(self) -> dict:
    return input_schema(self.input_model)

  def to_tool(self, strip: bool = True) -> Tool:
    schema = self.input_schema
    if strip:
      schema = strip_dialect(schema)
    return Tool(name=self.name, description=self.description, inputSchema=schema)
