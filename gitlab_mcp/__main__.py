"""
Entry point for the GitLab MCP server.

Run with: python -m gitlab_mcp   (or the gitlab-mcp console script)
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

log = logging.getLogger("gitlab_mcp")


def main() -> None:
  # stdout carries the MCP protocol, so logs go to stderr
  logging.basicConfig(
    level=os.environ.get("GITLAB_MCP_LOG_LEVEL", "INFO").upper(),
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  from .config import load_config
  from .errors import ConfigurationError
  from .server import run_server

  try:
    config = load_config()
  except ConfigurationError as e:
    log.error("%s", e)
    sys.exit(1)

  asyncio.run(run_server(config))


if __name__ == "__main__":
  main()
