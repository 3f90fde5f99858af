"""
MCP server wiring: tools/list and tools/call over stdio.
"""

from __future__ import annotations

import logging

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .client.gitlab_client import GitLabClient
from .config import Config
from .errors import GitLabMcpError
from .gateway import Gateway
from .helpers import error_envelope

log = logging.getLogger("gitlab_mcp.server")

SERVER_NAME = "gitlab-mcp-server"


def create_mcp_server(gateway: Gateway) -> Server:
  """Create and configure the MCP server around a gateway."""
  server = Server(SERVER_NAME, version=__version__)

  @server.list_tools()
  async def list_tools() -> list[types.Tool]:
    return gateway.list_tools()

  # Registered directly so a missing "arguments" field reaches the gateway
  # as None instead of being replaced with an empty dict.
  async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
    name = req.params.name
    try:
      result = await gateway.dispatch(name, req.params.arguments)
    except GitLabMcpError as e:
      log.error("Error calling %s: %s", name, e)
      result = error_envelope(f"Error in {name}: {e}")
    except Exception as e:
      log.exception("Unexpected error calling %s", name)
      result = error_envelope(f"Error in {name}: {e}")
    return types.ServerResult(result)

  server.request_handlers[types.CallToolRequest] = call_tool
  return server


async def run_server(config: Config) -> None:
  """Run the MCP server on stdio until the client disconnects."""
  client = GitLabClient(config)
  gateway = Gateway(client, config)
  server = create_mcp_server(gateway)

  log.info("%s v%s starting, API URL: %s", SERVER_NAME, __version__, config.api_url)
  log.info("Exposing %d of %d tools", len(gateway.list_tools()), len(gateway.tool_names))
  await client.check_auth()

  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await client.close()
    log.info("%s stopped", SERVER_NAME)
