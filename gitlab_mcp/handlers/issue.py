"""Issue domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, project_path
from ..helpers import deleted, join_labels, parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabIssue, GitLabIssueLink, GitLabIssueWithLinkDetails


def _issues(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}/issues"


def _issue_body(args: i.CreateIssueInput | i.UpdateIssueInput) -> dict:
  body = query(args, "project_id", "issue_iid")
  if args.labels is not None:
    body["labels"] = join_labels(args.labels)
  return body


async def create_issue(client: GitLabClient, args: i.CreateIssueInput) -> GitLabIssue:
  data = await client.post(_issues(args.project_id), json=_issue_body(args))
  return parse(GitLabIssue, data)


async def list_issues(client: GitLabClient, args: i.ListIssuesInput) -> list[GitLabIssue]:
  params = query(args, "project_id", "label_name")
  if args.label_name:
    params["labels"] = args.label_name
  data = await client.get(_issues(args.project_id), **params)
  return parse_list(GitLabIssue, data)


async def get_issue(client: GitLabClient, args: i.GetIssueInput) -> GitLabIssue:
  data = await client.get(f"{_issues(args.project_id)}/{args.issue_iid}")
  return parse(GitLabIssue, data)


async def update_issue(client: GitLabClient, args: i.UpdateIssueInput) -> GitLabIssue:
  data = await client.put(f"{_issues(args.project_id)}/{args.issue_iid}", json=_issue_body(args))
  return parse(GitLabIssue, data)


async def delete_issue(client: GitLabClient, args: i.DeleteIssueInput) -> dict:
  await client.delete(f"{_issues(args.project_id)}/{args.issue_iid}")
  return deleted("Issue")


async def list_issue_links(client: GitLabClient, args: i.ListIssueLinksInput) -> list[GitLabIssueWithLinkDetails]:
  data = await client.get(f"{_issues(args.project_id)}/{args.issue_iid}/links")
  return parse_list(GitLabIssueWithLinkDetails, data)


async def get_issue_link(client: GitLabClient, args: i.GetIssueLinkInput) -> GitLabIssueLink:
  data = await client.get(f"{_issues(args.project_id)}/{args.issue_iid}/links/{args.issue_link_id}")
  return parse(GitLabIssueLink, data)


async def create_issue_link(client: GitLabClient, args: i.CreateIssueLinkInput) -> GitLabIssueLink:
  body = {
    "target_project_id": args.target_project_id,
    "target_issue_iid": args.target_issue_iid,
    "link_type": args.link_type,
  }
  data = await client.post(f"{_issues(args.project_id)}/{args.issue_iid}/links", json=body)
  return parse(GitLabIssueLink, data)


async def delete_issue_link(client: GitLabClient, args: i.DeleteIssueLinkInput) -> dict:
  await client.delete(f"{_issues(args.project_id)}/{args.issue_iid}/links/{args.issue_link_id}")
  return deleted("Issue link")
