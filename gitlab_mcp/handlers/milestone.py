"""Milestone domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, project_path
from ..helpers import deleted, parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabBurndownEvent, GitLabIssue, GitLabMergeRequest, GitLabMilestone


def _milestones(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}/milestones"


async def list_milestones(client: GitLabClient, args: i.ListMilestonesInput) -> list[GitLabMilestone]:
  data = await client.get(_milestones(args.project_id), **query(args, "project_id"))
  return parse_list(GitLabMilestone, data)


async def get_milestone(client: GitLabClient, args: i.GetMilestoneInput) -> GitLabMilestone:
  data = await client.get(f"{_milestones(args.project_id)}/{args.milestone_id}")
  return parse(GitLabMilestone, data)


async def create_milestone(client: GitLabClient, args: i.CreateMilestoneInput) -> GitLabMilestone:
  data = await client.post(_milestones(args.project_id), json=query(args, "project_id"))
  return parse(GitLabMilestone, data)


async def edit_milestone(client: GitLabClient, args: i.EditMilestoneInput) -> GitLabMilestone:
  data = await client.put(
    f"{_milestones(args.project_id)}/{args.milestone_id}",
    json=query(args, "project_id", "milestone_id"),
  )
  return parse(GitLabMilestone, data)


async def delete_milestone(client: GitLabClient, args: i.DeleteMilestoneInput) -> dict:
  await client.delete(f"{_milestones(args.project_id)}/{args.milestone_id}")
  return deleted("Milestone")


async def get_milestone_issue(client: GitLabClient, args: i.GetMilestoneIssuesInput) -> list[GitLabIssue]:
  data = await client.get(
    f"{_milestones(args.project_id)}/{args.milestone_id}/issues",
    **query(args, "project_id", "milestone_id"),
  )
  return parse_list(GitLabIssue, data)


async def get_milestone_merge_requests(
  client: GitLabClient, args: i.GetMilestoneMergeRequestsInput
) -> list[GitLabMergeRequest]:
  data = await client.get(
    f"{_milestones(args.project_id)}/{args.milestone_id}/merge_requests",
    **query(args, "project_id", "milestone_id"),
  )
  return parse_list(GitLabMergeRequest, data)


async def promote_milestone(client: GitLabClient, args: i.PromoteMilestoneInput) -> GitLabMilestone:
  data = await client.post(f"{_milestones(args.project_id)}/{args.milestone_id}/promote")
  return parse(GitLabMilestone, data)


async def get_milestone_burndown_events(
  client: GitLabClient, args: i.GetMilestoneBurndownEventsInput
) -> list[GitLabBurndownEvent]:
  data = await client.get(f"{_milestones(args.project_id)}/{args.milestone_id}/burndown_events")
  return parse_list(GitLabBurndownEvent, data)
