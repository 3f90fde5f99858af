"""Test doubles and canned GitLab payloads."""

from __future__ import annotations

import json
from collections import deque
from typing import Any

from gitlab_mcp.client.gitlab_client import HttpRequest, HttpResponse
from gitlab_mcp.config import Config, ModeFlags

API_URL = "https://gitlab.example.com/api/v4"


class FakeTransport:
  """Records every request and replays queued responses in order."""

  def __init__(self) -> None:
    self.requests: list[HttpRequest] = []
    self._responses: deque[HttpResponse] = deque()
    self.closed = False

  def queue(
    self,
    body: Any = None,
    status: int = 200,
    headers: dict[str, str] | None = None,
    reason: str = "",
  ) -> None:
    if body is None:
      text = ""
    elif isinstance(body, str):
      text = body
    else:
      text = json.dumps(body)
    self._responses.append(HttpResponse(status=status, reason=reason, headers=headers or {}, body=text))

  async def send(self, request: HttpRequest) -> HttpResponse:
    self.requests.append(request)
    if not self._responses:
      raise AssertionError(f"Unexpected request: {request.method} {request.url}")
    return self._responses.popleft()

  async def close(self) -> None:
    self.closed = True

  @property
  def last(self) -> HttpRequest:
    return self.requests[-1]


def make_config(**flags: bool) -> Config:
  return Config(token="glpat-test", api_url=API_URL, flags=ModeFlags(**flags))


MINIMAL_ISSUE = {"id": 101, "iid": 7, "project_id": 42, "title": "Broken build"}

MINIMAL_MR = {
  "id": 501,
  "iid": 3,
  "project_id": 42,
  "title": "Add feature",
  "state": "opened",
  "source_branch": "feature",
  "target_branch": "main",
}


def file_payload(content_b64: str, **extra: Any) -> dict[str, Any]:
  payload = {
    "file_name": "README.md",
    "file_path": "README.md",
    "size": 5,
    "encoding": "base64",
    "content": content_b64,
    "ref": "main",
    "blob_id": "blob1",
    "commit_id": "commit1",
    "last_commit_id": "last1",
  }
  payload.update(extra)
  return payload
