"""
Error taxonomy for the GitLab MCP server.

Backend failures carry an ErrorKind tag assigned once, at the HTTP client
boundary. Handlers match on the tag instead of inspecting messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GitLabMcpError(Exception):
  """Base class for every error raised by this package."""


class ConfigurationError(GitLabMcpError):
  """Invalid or missing startup configuration. Fatal."""


class ArgumentsRequiredError(GitLabMcpError):
  def __init__(self) -> None:
    super().__init__("Arguments are required")


class UnknownToolError(GitLabMcpError):
  def __init__(self, tool_name: str) -> None:
    self.tool_name = tool_name
    super().__init__(f"Unknown tool: {tool_name}")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldError:
  path: str
  reason: str

  def __str__(self) -> str:
    return f"{self.path}: {self.reason}" if self.path else self.reason


class ToolValidationError(GitLabMcpError):
  """Every invalid field of one invocation, reported together."""

  def __init__(self, tool_name: str, errors: list[FieldError]) -> None:
    self.tool_name = tool_name
    self.errors = list(errors)
    details = ", ".join(str(e) for e in self.errors)
    super().__init__(f"Invalid arguments for {tool_name}: {details}")

  @property
  def paths(self) -> list[str]:
    return [e.path for e in self.errors]


# ---------------------------------------------------------------------------
# Backend / transport
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
  NOT_FOUND = "NOT_FOUND"
  RATE_LIMITED = "RATE_LIMITED"
  INVALID_REQUEST = "INVALID_REQUEST"
  GENERIC = "GENERIC"


class BackendError(GitLabMcpError):
  """GitLab answered with a non-success status."""

  def __init__(
    self,
    kind: ErrorKind,
    status: int,
    reason: str = "",
    body: str = "",
    message: str | None = None,
  ) -> None:
    self.kind = kind
    self.status = status
    self.reason = reason
    self.body = body
    super().__init__(message or f"GitLab API error: {status} {reason}\n{body}")

  @property
  def is_not_found(self) -> bool:
    return self.kind is ErrorKind.NOT_FOUND


class TransportError(GitLabMcpError):
  """The HTTP request itself failed (DNS, connection, timeout)."""
