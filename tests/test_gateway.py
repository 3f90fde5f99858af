"""Tests for the dispatch gateway and tool registry."""

from __future__ import annotations

import json

import pytest

from gitlab_mcp.client.gitlab_client import GitLabClient
from gitlab_mcp.errors import (
  ArgumentsRequiredError,
  BackendError,
  ErrorKind,
  ToolValidationError,
  UnknownToolError,
)
from gitlab_mcp.gateway import Gateway, build_registry
from gitlab_mcp.handlers import DISPATCH
from gitlab_mcp.schemas.inputs import GetIssueInput
from gitlab_mcp.tools import ALL_TOOLS, ToolDescriptor, list_all

from .fakes import MINIMAL_ISSUE, make_config


def result_text(result) -> str:
  assert not result.isError
  assert len(result.content) == 1
  return result.content[0].text


class TestRegistry:
  def test_every_cataloged_tool_has_a_handler(self):
    assert {t.name for t in ALL_TOOLS} == set(DISPATCH)

  def test_catalog_names_unique(self):
    names = [t.name for t in list_all()]
    assert len(names) == len(set(names))

  def test_duplicate_name_rejected(self):
    dup = ToolDescriptor(name="get_issue", description="again", input_model=GetIssueInput)
    with pytest.raises(RuntimeError, match="Duplicate"):
      build_registry([*ALL_TOOLS, dup], DISPATCH)

  def test_missing_handler_rejected(self):
    orphan = ToolDescriptor(name="archive_project", description="x", input_model=GetIssueInput)
    with pytest.raises(RuntimeError, match="archive_project"):
      build_registry([orphan], DISPATCH)


class TestListTools:
  def test_schemas_are_stripped(self, gateway):
    for tool in gateway.list_tools():
      assert "$schema" not in tool.inputSchema
      assert tool.inputSchema["type"] == "object"

  def test_read_only_listing(self, client):
    gw = Gateway(client, make_config(read_only=True))
    listed = {t.name for t in gw.list_tools()}
    assert "get_issue" in listed
    assert "create_issue" not in listed


class TestDispatch:
  @pytest.mark.asyncio
  async def test_get_issue_round_trip(self, gateway, transport):
    transport.queue(MINIMAL_ISSUE)
    result = await gateway.dispatch("get_issue", {"project_id": "42", "issue_iid": 7})

    assert json.loads(result_text(result)) == MINIMAL_ISSUE
    assert transport.last.url.endswith("/projects/42/issues/7")

  @pytest.mark.asyncio
  async def test_numeric_project_id_accepted(self, gateway, transport):
    transport.queue(MINIMAL_ISSUE)
    await gateway.dispatch("get_issue", {"project_id": 42, "issue_iid": 7})
    assert transport.last.url.endswith("/projects/42/issues/7")

  @pytest.mark.asyncio
  async def test_missing_field_is_reported(self, gateway, transport):
    with pytest.raises(ToolValidationError) as exc_info:
      await gateway.dispatch("get_issue", {"project_id": "42"})
    assert exc_info.value.paths == ["issue_iid"]
    assert "get_issue" in str(exc_info.value)
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_all_invalid_fields_reported_together(self, gateway, transport):
    with pytest.raises(ToolValidationError) as exc_info:
      await gateway.dispatch("create_merge_request", {"project_id": "42", "title": "x"})
    assert set(exc_info.value.paths) == {"source_branch", "target_branch"}
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_nested_field_paths(self, gateway, transport):
    args = {
      "project_id": "42",
      "branch": "main",
      "commit_message": "bulk",
      "files": [{"file_path": "a.txt"}, {}],
    }
    with pytest.raises(ToolValidationError) as exc_info:
      await gateway.dispatch("push_files", args)
    assert exc_info.value.paths == ["files.0.content", "files.1.file_path", "files.1.content"]
    assert "files.1.file_path" in str(exc_info.value)
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_cross_field_rule(self, gateway, transport):
    with pytest.raises(ToolValidationError, match="Either merge_request_iid or source_branch"):
      await gateway.dispatch("get_merge_request", {"project_id": "42"})
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_rate_limit_is_not_retried(self, gateway, transport):
    transport.queue('{"message":"User API Key Rate limit exceeded"}', status=403, reason="Forbidden")
    with pytest.raises(BackendError) as exc_info:
      await gateway.dispatch("get_issue", {"project_id": "42", "issue_iid": 7})
    assert exc_info.value.kind is ErrorKind.RATE_LIMITED
    assert "try again later" in str(exc_info.value)
    assert len(transport.requests) == 1

  @pytest.mark.asyncio
  async def test_unknown_tool(self, gateway, transport):
    with pytest.raises(UnknownToolError, match="Unknown tool: does_not_exist"):
      await gateway.dispatch("does_not_exist", {})
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_arguments_required(self, gateway, transport):
    with pytest.raises(ArgumentsRequiredError, match="Arguments are required"):
      await gateway.dispatch("list_projects", None)
    assert transport.requests == []

  @pytest.mark.asyncio
  async def test_empty_arguments_are_allowed(self, gateway, transport):
    transport.queue([])
    result = await gateway.dispatch("list_projects", {})
    assert json.loads(result_text(result)) == []

  @pytest.mark.asyncio
  async def test_hidden_tool_still_dispatches(self, transport):
    config = make_config(read_only=True)
    gw = Gateway(GitLabClient(config, transport=transport), config)
    assert "create_issue" not in {t.name for t in gw.list_tools()}

    transport.queue(MINIMAL_ISSUE, status=201)
    result = await gw.dispatch("create_issue", {"project_id": "42", "title": "Broken build"})
    assert json.loads(result_text(result))["iid"] == 7
    assert transport.last.method == "POST"

  @pytest.mark.asyncio
  async def test_text_output_is_passed_through(self, gateway, transport):
    transport.queue("Running with gitlab-runner\nJob succeeded")
    result = await gateway.dispatch("get_pipeline_job_output", {"project_id": "42", "job_id": 9})
    assert result_text(result) == "Running with gitlab-runner\nJob succeeded"

  @pytest.mark.asyncio
  async def test_unexpected_response_shape(self, gateway, transport):
    transport.queue({"id": 101})
    with pytest.raises(ToolValidationError) as exc_info:
      await gateway.dispatch("get_issue", {"project_id": "42", "issue_iid": 7})
    assert "iid" in exc_info.value.paths
    assert "title" in exc_info.value.paths

