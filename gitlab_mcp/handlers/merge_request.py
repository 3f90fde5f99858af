"""Merge request domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, encode_segment, project_path
from ..errors import BackendError, ErrorKind
from ..helpers import join_labels, parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import (
  GitLabDiscussion,
  GitLabDiscussionNote,
  GitLabMergeRequest,
  GitLabMergeRequestDiff,
)


def _mr_base(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}/merge_requests"


async def _find_by_branch(client: GitLabClient, project_id: str, branch: str) -> dict:
  items = await client.get(_mr_base(project_id), source_branch=branch)
  if not items:
    raise BackendError(
      ErrorKind.NOT_FOUND, 404, "Not Found", message=f"No merge request found for branch: {branch}"
    )
  return items[0]


async def _resolve_iid(client: GitLabClient, args: i.MergeRequestLookupInput) -> int:
  if args.merge_request_iid is not None:
    return args.merge_request_iid
  found = await _find_by_branch(client, args.project_id, args.source_branch or "")
  return int(found["iid"])


async def create_merge_request(client: GitLabClient, args: i.CreateMergeRequestInput) -> GitLabMergeRequest:
  data = await client.post(_mr_base(args.project_id), json=query(args, "project_id"))
  return parse(GitLabMergeRequest, data)


async def get_merge_request(client: GitLabClient, args: i.GetMergeRequestInput) -> GitLabMergeRequest:
  if args.merge_request_iid is not None:
    data = await client.get(f"{_mr_base(args.project_id)}/{args.merge_request_iid}")
  else:
    data = await _find_by_branch(client, args.project_id, args.source_branch or "")
  return parse(GitLabMergeRequest, data)


async def get_merge_request_diffs(
  client: GitLabClient, args: i.GetMergeRequestDiffsInput
) -> list[GitLabMergeRequestDiff]:
  iid = await _resolve_iid(client, args)
  data = await client.get(f"{_mr_base(args.project_id)}/{iid}/changes", view=args.view)
  return parse_list(GitLabMergeRequestDiff, (data or {}).get("changes"))


async def update_merge_request(client: GitLabClient, args: i.UpdateMergeRequestInput) -> GitLabMergeRequest:
  iid = await _resolve_iid(client, args)
  body = query(args, "project_id", "merge_request_iid", "source_branch")
  if args.labels is not None:
    body["labels"] = join_labels(args.labels)
  data = await client.put(f"{_mr_base(args.project_id)}/{iid}", json=body)
  return parse(GitLabMergeRequest, data)


async def list_merge_requests(client: GitLabClient, args: i.ListMergeRequestsInput) -> list[GitLabMergeRequest]:
  data = await client.get(_mr_base(args.project_id), **query(args, "project_id"))
  return parse_list(GitLabMergeRequest, data)


async def create_note(client: GitLabClient, args: i.CreateNoteInput) -> GitLabDiscussionNote:
  # noteable_type is "issue" or "merge_request"; the collection is its plural
  url = f"/projects/{project_path(args.project_id)}/{args.noteable_type}s/{args.noteable_iid}/notes"
  data = await client.post(url, json={"body": args.body})
  return parse(GitLabDiscussionNote, data)


async def mr_discussions(client: GitLabClient, args: i.ListMergeRequestDiscussionsInput) -> list[GitLabDiscussion]:
  data = await client.get(f"{_mr_base(args.project_id)}/{args.merge_request_iid}/discussions")
  return parse_list(GitLabDiscussion, data)


async def update_merge_request_note(
  client: GitLabClient, args: i.UpdateMergeRequestNoteInput
) -> GitLabDiscussionNote:
  url = (
    f"{_mr_base(args.project_id)}/{args.merge_request_iid}"
    f"/discussions/{encode_segment(args.discussion_id)}/notes/{args.note_id}"
  )
  body = {"body": args.body} if args.body is not None else {"resolved": args.resolved}
  data = await client.put(url, json=body)
  return parse(GitLabDiscussionNote, data)
