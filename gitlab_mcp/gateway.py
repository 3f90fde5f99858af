"""
Dispatch gateway: the registry of tools and the single entry point that
turns a (name, arguments) invocation into a response envelope.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, Tool
from pydantic import ValidationError

from .client.gitlab_client import GitLabClient
from .config import Config
from .errors import ArgumentsRequiredError, UnknownToolError
from .handlers import DISPATCH, Handler
from .helpers import render_json, text_envelope
from .tools import ALL_TOOLS, ToolDescriptor
from .validation import as_tool_validation_error, validate_arguments
from .visibility import filter_tools

log = logging.getLogger("gitlab_mcp.gateway")


@dataclass(frozen=True)
class ToolEntry:
  descriptor: ToolDescriptor
  handler: Handler


def build_registry(
  descriptors: Sequence[ToolDescriptor],
  dispatch_table: Mapping[str, Handler],
) -> dict[str, ToolEntry]:
  """Pair every cataloged tool with its handler. Fails fast on gaps."""
  registry: dict[str, ToolEntry] = {}
  for descriptor in descriptors:
    if descriptor.name in registry:
      raise RuntimeError(f"Duplicate tool name in catalog: {descriptor.name}")
    handler = dispatch_table.get(descriptor.name)
    if handler is None:
      raise RuntimeError(f"No handler registered for tool: {descriptor.name}")
    registry[descriptor.name] = ToolEntry(descriptor=descriptor, handler=handler)
  return registry


class Gateway:
  """Routes tool invocations to handlers.

  Visibility only affects list_tools(). dispatch() serves every cataloged
  tool, including those hidden by the current mode flags.
  """

  def __init__(
    self,
    client: GitLabClient,
    config: Config,
    descriptors: Sequence[ToolDescriptor] = ALL_TOOLS,
    dispatch_table: Mapping[str, Handler] = DISPATCH,
  ) -> None:
    self._client = client
    self._config = config
    self._registry = build_registry(descriptors, dispatch_table)
    visible = filter_tools(list(descriptors), config.flags)
    self._tools = [d.to_tool() for d in visible]
    log.debug("Registered %d tools, %d visible", len(self._registry), len(self._tools))

  @property
  def tool_names(self) -> list[str]:
    return list(self._registry)

  def list_tools(self) -> list[Tool]:
    return list(self._tools)

  async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    if arguments is None:
      raise ArgumentsRequiredError()

    entry = self._registry.get(name)
    if entry is None:
      raise UnknownToolError(name)

    args = validate_arguments(name, entry.descriptor.input_model, arguments)

    try:
      result = await entry.handler(self._client, args)
    except ValidationError as e:
      # GitLab returned a payload that does not match the response model
      raise as_tool_validation_error(name, e) from e

    if entry.descriptor.output == "text":
      return text_envelope(result if isinstance(result, str) else str(result))
    return text_envelope(render_json(result))

