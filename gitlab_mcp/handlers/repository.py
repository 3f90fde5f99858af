"""Repository domain tool handlers."""

from __future__ import annotations

import base64
import logging
import math
import re

from ..client.gitlab_client import GitLabClient, encode_segment, project_path
from ..errors import BackendError, ErrorKind
from ..helpers import parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import (
  GitLabCommit,
  GitLabCreateUpdateFileResponse,
  GitLabFileContent,
  GitLabFork,
  GitLabProject,
  GitLabReference,
  GitLabSearchResponse,
  GitLabTreeItem,
)

log = logging.getLogger("gitlab_mcp.handlers.repository")


async def _default_branch(client: GitLabClient, project_id: str) -> str:
  project = await client.get(f"/projects/{project_path(project_id)}")
  return (project or {}).get("default_branch") or "main"


def _file_url(project_id: str, file_path: str) -> str:
  return f"/projects/{project_path(project_id)}/repository/files/{encode_segment(file_path)}"


async def _fetch_file(
  client: GitLabClient, project_id: str, file_path: str, ref: str | None
) -> GitLabFileContent:
  if not ref:
    ref = await _default_branch(client, project_id)
  try:
    data = await client.get(_file_url(project_id, file_path), ref=ref)
  except BackendError as e:
    if e.is_not_found:
      raise BackendError(
        ErrorKind.NOT_FOUND, e.status, e.reason, e.body, message=f"File not found: {file_path}"
      ) from e
    raise

  content = parse(GitLabFileContent, data)
  if content.encoding == "base64":
    decoded = base64.b64decode(content.content).decode("utf-8", errors="replace")
    content = content.model_copy(update={"content": decoded, "encoding": "utf8"})
  return content


async def get_file_contents(client: GitLabClient, args: i.GetFileContentsInput) -> GitLabFileContent:
  return await _fetch_file(client, args.project_id, args.file_path, args.ref)


async def create_or_update_file(
  client: GitLabClient, args: i.CreateOrUpdateFileInput
) -> GitLabCreateUpdateFileResponse:
  body: dict = {
    "branch": args.branch,
    "content": args.content,
    "commit_message": args.commit_message,
    "encoding": "text",
  }
  if args.previous_path:
    body["previous_path"] = args.previous_path

  try:
    existing: GitLabFileContent | None = await _fetch_file(
      client, args.project_id, args.file_path, args.branch
    )
  except BackendError as e:
    if not e.is_not_found:
      raise
    existing = None

  if existing is None:
    method = "POST"
    if args.commit_id:
      body["commit_id"] = args.commit_id
    if args.last_commit_id:
      body["last_commit_id"] = args.last_commit_id
  else:
    method = "PUT"
    body["commit_id"] = args.commit_id or existing.commit_id
    body["last_commit_id"] = args.last_commit_id or existing.last_commit_id

  log.debug("%s %s in %s", "Creating" if method == "POST" else "Updating", args.file_path, args.project_id)
  url = _file_url(args.project_id, args.file_path)
  if method == "POST":
    data = await client.post(url, json=body)
  else:
    data = await client.put(url, json=body)
  return parse(GitLabCreateUpdateFileResponse, data)


async def search_repositories(client: GitLabClient, args: i.SearchRepositoriesInput) -> GitLabSearchResponse:
  response = await client.get_response(
    "/projects",
    search=args.search,
    page=args.page,
    per_page=args.per_page,
    order_by="id",
    sort="desc",
  )
  items = parse_list(GitLabProject, response.json())

  total = response.header("x-total")
  total_pages = response.header("x-total-pages")
  count = int(total) if total else len(items)
  return GitLabSearchResponse(
    count=count,
    total_pages=int(total_pages) if total_pages else math.ceil(count / args.per_page),
    current_page=args.page,
    items=items,
  )


async def create_repository(client: GitLabClient, args: i.CreateRepositoryInput) -> GitLabProject:
  body = query(args)
  body["path"] = re.sub(r"\s+", "-", args.name.lower())
  body["default_branch"] = "main"
  data = await client.post("/projects", json=body)
  return parse(GitLabProject, data)


async def push_files(client: GitLabClient, args: i.PushFilesInput) -> GitLabCommit:
  body = {
    "branch": args.branch,
    "commit_message": args.commit_message,
    "actions": [
      {"action": "create", "file_path": f.file_path, "content": f.content} for f in args.files
    ],
  }
  data = await client.post(f"/projects/{project_path(args.project_id)}/repository/commits", json=body)
  return parse(GitLabCommit, data)


async def fork_repository(client: GitLabClient, args: i.ForkRepositoryInput) -> GitLabFork:
  try:
    data = await client.post(
      f"/projects/{project_path(args.project_id)}/fork",
      params={"namespace": args.namespace},
    )
  except BackendError as e:
    if e.status == 409:
      raise BackendError(
        ErrorKind.GENERIC,
        e.status,
        e.reason,
        e.body,
        message="Project already exists in the target namespace",
      ) from e
    raise
  return parse(GitLabFork, data)


async def create_branch(client: GitLabClient, args: i.CreateBranchInput) -> GitLabReference:
  ref = args.ref or await _default_branch(client, args.project_id)
  data = await client.post(
    f"/projects/{project_path(args.project_id)}/repository/branches",
    json={"branch": args.branch, "ref": ref},
  )
  return parse(GitLabReference, data)


async def get_repository_tree(client: GitLabClient, args: i.GetRepositoryTreeInput) -> list[GitLabTreeItem]:
  try:
    data = await client.get(
      f"/projects/{project_path(args.project_id)}/repository/tree",
      **query(args, "project_id"),
    )
  except BackendError as e:
    if e.is_not_found:
      raise BackendError(
        ErrorKind.NOT_FOUND, e.status, e.reason, e.body, message="Repository or path not found"
      ) from e
    raise
  return parse_list(GitLabTreeItem, data)
