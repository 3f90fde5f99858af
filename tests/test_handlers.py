"""Tests for handler request construction and response handling."""

from __future__ import annotations

import base64

import pytest

from gitlab_mcp.errors import BackendError, ErrorKind
from gitlab_mcp.handlers import issue, merge_request, pipeline, repository, wiki
from gitlab_mcp.schemas import inputs as i

from .fakes import API_URL, MINIMAL_ISSUE, MINIMAL_MR, file_payload


def b64(text: str) -> str:
  return base64.b64encode(text.encode("utf-8")).decode("ascii")


def not_found(transport, body='{"message":"404 Not Found"}'):
  transport.queue(body, status=404, reason="Not Found")


class TestFiles:
  @pytest.mark.asyncio
  async def test_get_file_contents_uses_default_branch(self, client, transport):
    transport.queue({"id": 42, "name": "demo", "path_with_namespace": "g/demo", "default_branch": "develop"})
    transport.queue(file_payload(b64("héllo")))

    result = await repository.get_file_contents(
      client, i.GetFileContentsInput(project_id="g/demo", file_path="docs/README.md")
    )

    assert result.content == "héllo"
    assert result.encoding == "utf8"
    project_req, file_req = transport.requests
    assert project_req.url == f"{API_URL}/projects/g%2Fdemo"
    assert file_req.url == f"{API_URL}/projects/g%2Fdemo/repository/files/docs%2FREADME.md"
    assert file_req.params == {"ref": "develop"}

  @pytest.mark.asyncio
  async def test_get_file_contents_not_found(self, client, transport):
    not_found(transport)
    with pytest.raises(BackendError, match="File not found: missing.txt") as exc_info:
      await repository.get_file_contents(
        client, i.GetFileContentsInput(project_id="42", file_path="missing.txt", ref="main")
      )
    assert exc_info.value.kind is ErrorKind.NOT_FOUND

  @pytest.mark.asyncio
  async def test_create_file_when_absent(self, client, transport):
    not_found(transport)
    transport.queue({"file_path": "new.txt", "branch": "main"}, status=201)

    result = await repository.create_or_update_file(
      client,
      i.CreateOrUpdateFileInput(
        project_id="42", file_path="new.txt", content="hi", commit_message="add", branch="main"
      ),
    )

    assert result.file_path == "new.txt"
    write = transport.last
    assert write.method == "POST"
    assert "commit_id" not in write.json_body
    assert "last_commit_id" not in write.json_body
    assert write.json_body["encoding"] == "text"

  @pytest.mark.asyncio
  async def test_update_file_fills_commit_ids(self, client, transport):
    transport.queue(file_payload(b64("old"), commit_id="c-probe", last_commit_id="l-probe"))
    transport.queue({"file_path": "README.md", "branch": "main"})

    await repository.create_or_update_file(
      client,
      i.CreateOrUpdateFileInput(
        project_id="42",
        file_path="README.md",
        content="new",
        commit_message="update",
        branch="main",
        last_commit_id="l-caller",
      ),
    )

    write = transport.last
    assert write.method == "PUT"
    assert write.json_body["commit_id"] == "c-probe"
    assert write.json_body["last_commit_id"] == "l-caller"

  @pytest.mark.asyncio
  async def test_update_existing_binary_file(self, client, transport):
    png = base64.b64encode(b"\x89PNG\r\n\x1a\n\xff\xfe").decode("ascii")
    transport.queue(file_payload(png, file_path="logo.png", commit_id="c-bin", last_commit_id="l-bin"))
    transport.queue({"file_path": "logo.png", "branch": "main"})

    await repository.create_or_update_file(
      client,
      i.CreateOrUpdateFileInput(
        project_id="42", file_path="logo.png", content="replaced", commit_message="m", branch="main"
      ),
    )

    write = transport.last
    assert write.method == "PUT"
    assert write.json_body["commit_id"] == "c-bin"

  @pytest.mark.asyncio
  async def test_non_utf8_content_is_decoded_lossily(self, client, transport):
    latin1 = base64.b64encode("caf\u00e9".encode("latin-1")).decode("ascii")
    transport.queue(file_payload(latin1))
    result = await repository.get_file_contents(
      client, i.GetFileContentsInput(project_id="42", file_path="README.md", ref="main")
    )
    assert result.content == "caf\ufffd"
    assert result.encoding == "utf8"

  @pytest.mark.asyncio
  async def test_probe_failure_propagates(self, client, transport):
    transport.queue("boom", status=500, reason="Internal Server Error")
    with pytest.raises(BackendError) as exc_info:
      await repository.create_or_update_file(
        client,
        i.CreateOrUpdateFileInput(
          project_id="42", file_path="a.txt", content="x", commit_message="m", branch="main"
        ),
      )
    assert exc_info.value.kind is ErrorKind.GENERIC
    assert len(transport.requests) == 1

  @pytest.mark.asyncio
  async def test_push_files_builds_actions(self, client, transport):
    transport.queue({"id": "abc", "short_id": "abc", "title": "bulk"}, status=201)
    await repository.push_files(
      client,
      i.PushFilesInput(
        project_id="42",
        branch="main",
        commit_message="bulk",
        files=[{"file_path": "a.txt", "content": "A"}, {"file_path": "b.txt", "content": "B"}],
      ),
    )
    assert transport.last.url == f"{API_URL}/projects/42/repository/commits"
    assert transport.last.json_body["actions"] == [
      {"action": "create", "file_path": "a.txt", "content": "A"},
      {"action": "create", "file_path": "b.txt", "content": "B"},
    ]


class TestRepositories:
  @pytest.mark.asyncio
  async def test_search_reads_pagination_headers(self, client, transport):
    items = [{"id": 1, "name": "a", "path_with_namespace": "g/a"}]
    transport.queue(items, headers={"X-Total": "41", "X-Total-Pages": "3"})

    result = await repository.search_repositories(
      client, i.SearchRepositoriesInput(search="demo", per_page=20)
    )

    assert (result.count, result.total_pages, result.current_page) == (41, 3, 1)
    assert transport.last.params["order_by"] == "id"
    assert transport.last.params["sort"] == "desc"

  @pytest.mark.asyncio
  async def test_search_without_headers(self, client, transport):
    items = [{"id": n, "name": f"p{n}", "path_with_namespace": f"g/p{n}"} for n in range(3)]
    transport.queue(items)
    result = await repository.search_repositories(client, i.SearchRepositoriesInput(search="p", per_page=2))
    assert result.count == 3
    assert result.total_pages == 2

  @pytest.mark.asyncio
  async def test_create_repository_derives_path(self, client, transport):
    transport.queue({"id": 9, "name": "My Cool  Repo", "path_with_namespace": "me/my-cool-repo"}, status=201)
    await repository.create_repository(client, i.CreateRepositoryInput(name="My Cool  Repo"))
    body = transport.last.json_body
    assert body["path"] == "my-cool-repo"
    assert body["default_branch"] == "main"
    assert "description" not in body

  @pytest.mark.asyncio
  async def test_fork_conflict(self, client, transport):
    transport.queue('{"message":"has already been taken"}', status=409, reason="Conflict")
    with pytest.raises(BackendError, match="Project already exists in the target namespace"):
      await repository.fork_repository(client, i.ForkRepositoryInput(project_id="42", namespace="me"))
    assert transport.last.params == {"namespace": "me"}

  @pytest.mark.asyncio
  async def test_create_branch_resolves_default_ref(self, client, transport):
    transport.queue({"id": 42, "name": "demo", "path_with_namespace": "g/demo"})
    transport.queue({"name": "topic", "commit": {"id": "abc"}}, status=201)
    result = await repository.create_branch(client, i.CreateBranchInput(project_id="42", branch="topic"))
    assert result.name == "topic"
    assert transport.last.json_body == {"branch": "topic", "ref": "main"}

  @pytest.mark.asyncio
  async def test_tree_passes_path_as_query(self, client, transport):
    transport.queue([{"id": "t1", "name": "main.py", "type": "blob", "path": "src/main.py", "mode": "100644"}])
    items = await repository.get_repository_tree(
      client, i.GetRepositoryTreeInput(project_id="42", path="src", recursive=True)
    )
    assert [item.path for item in items] == ["src/main.py"]
    assert transport.last.url == f"{API_URL}/projects/42/repository/tree"
    assert transport.last.params == {"path": "src", "recursive": "true"}

  @pytest.mark.asyncio
  async def test_tree_not_found(self, client, transport):
    not_found(transport)
    with pytest.raises(BackendError, match="Repository or path not found") as exc_info:
      await repository.get_repository_tree(client, i.GetRepositoryTreeInput(project_id="42", path="nope"))
    assert exc_info.value.is_not_found


class TestMergeRequests:
  @pytest.mark.asyncio
  async def test_get_by_branch_uses_first_match(self, client, transport):
    other = {**MINIMAL_MR, "iid": 4}
    transport.queue([MINIMAL_MR, other])
    result = await merge_request.get_merge_request(
      client, i.GetMergeRequestInput(project_id="42", source_branch="feature")
    )
    assert result.iid == 3
    assert transport.last.params == {"source_branch": "feature"}
    assert len(transport.requests) == 1

  @pytest.mark.asyncio
  async def test_get_by_branch_without_match(self, client, transport):
    transport.queue([])
    with pytest.raises(BackendError) as exc_info:
      await merge_request.get_merge_request(
        client, i.GetMergeRequestInput(project_id="42", source_branch="ghost")
      )
    assert exc_info.value.is_not_found

  @pytest.mark.asyncio
  async def test_diffs_by_branch(self, client, transport):
    transport.queue([MINIMAL_MR])
    change = {
      "old_path": "a.py",
      "new_path": "a.py",
      "diff": "@@ -1 +1 @@",
      "new_file": False,
      "renamed_file": False,
      "deleted_file": False,
    }
    transport.queue({"changes": [change]})

    diffs = await merge_request.get_merge_request_diffs(
      client, i.GetMergeRequestDiffsInput(project_id="42", source_branch="feature")
    )

    assert [d.new_path for d in diffs] == ["a.py"]
    assert transport.last.url == f"{API_URL}/projects/42/merge_requests/3/changes"

  @pytest.mark.asyncio
  async def test_update_sends_only_changes(self, client, transport):
    transport.queue({**MINIMAL_MR, "title": "Renamed"})
    await merge_request.update_merge_request(
      client,
      i.UpdateMergeRequestInput(project_id="42", merge_request_iid=3, title="Renamed", labels=["a", "b"]),
    )
    assert transport.last.method == "PUT"
    assert transport.last.json_body == {"title": "Renamed", "labels": "a,b"}

  @pytest.mark.asyncio
  async def test_update_note_sends_one_field(self, client, transport):
    transport.queue({"id": 77, "body": "done", "resolved": True})
    await merge_request.update_merge_request_note(
      client,
      i.UpdateMergeRequestNoteInput(
        project_id="42", merge_request_iid=3, discussion_id="d1", note_id=77, resolved=True
      ),
    )
    assert transport.last.url == f"{API_URL}/projects/42/merge_requests/3/discussions/d1/notes/77"
    assert transport.last.json_body == {"resolved": True}

  @pytest.mark.asyncio
  async def test_create_note_on_issue(self, client, transport):
    transport.queue({"id": 1, "body": "hello"}, status=201)
    await merge_request.create_note(
      client, i.CreateNoteInput(project_id="42", noteable_type="issue", noteable_iid=7, body="hello")
    )
    assert transport.last.url == f"{API_URL}/projects/42/issues/7/notes"


class TestIssues:
  @pytest.mark.asyncio
  async def test_create_issue_joins_labels(self, client, transport):
    transport.queue(MINIMAL_ISSUE, status=201)
    await issue.create_issue(
      client, i.CreateIssueInput(project_id="42", title="Broken build", labels=["bug", "ci"])
    )
    assert transport.last.json_body == {"title": "Broken build", "labels": "bug,ci"}

  @pytest.mark.asyncio
  async def test_list_issues_maps_label_filter(self, client, transport):
    transport.queue([MINIMAL_ISSUE])
    await issue.list_issues(client, i.ListIssuesInput(project_id="42", label_name=["bug"], state="opened"))
    assert transport.last.params == {"state": "opened", "labels": "bug"}

  @pytest.mark.asyncio
  async def test_delete_issue(self, client, transport):
    transport.queue(status=204)
    result = await issue.delete_issue(client, i.DeleteIssueInput(project_id="42", issue_iid=7))
    assert result == {"status": "success", "message": "Issue deleted successfully"}
    assert transport.last.method == "DELETE"

  @pytest.mark.asyncio
  async def test_create_issue_link_defaults_type(self, client, transport):
    transport.queue(
      {"source_issue": MINIMAL_ISSUE, "target_issue": {**MINIMAL_ISSUE, "iid": 8}, "link_type": "relates_to"},
      status=201,
    )
    link = await issue.create_issue_link(
      client, i.CreateIssueLinkInput(project_id="42", issue_iid=7, target_project_id="42", target_issue_iid=8)
    )
    assert link.target_issue.iid == 8
    assert transport.last.json_body["link_type"] == "relates_to"


class TestPipelinesAndWiki:
  @pytest.mark.asyncio
  async def test_create_pipeline_variables(self, client, transport):
    transport.queue({"id": 12, "status": "created"}, status=201)
    await pipeline.create_pipeline(
      client,
      i.CreatePipelineInput(project_id="42", ref="main", variables=[{"key": "DEPLOY", "value": "1"}]),
    )
    assert transport.last.url == f"{API_URL}/projects/42/pipeline"
    assert transport.last.json_body == {"ref": "main", "variables": [{"key": "DEPLOY", "value": "1"}]}

  @pytest.mark.asyncio
  async def test_wiki_slug_is_encoded(self, client, transport):
    transport.queue({"title": "Setup", "slug": "dev/setup"})
    await wiki.get_wiki_page(client, i.GetWikiPageInput(project_id="42", slug="dev/setup"))
    assert transport.last.url == f"{API_URL}/projects/42/wikis/dev%2Fsetup"
