"""Project domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, project_path
from ..helpers import parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabProject


async def get_project(client: GitLabClient, args: i.GetProjectInput) -> GitLabProject:
  data = await client.get(f"/projects/{project_path(args.project_id)}", **query(args, "project_id"))
  return parse(GitLabProject, data)


async def list_projects(client: GitLabClient, args: i.ListProjectsInput) -> list[GitLabProject]:
  data = await client.get("/projects", **query(args))
  return parse_list(GitLabProject, data)


async def list_group_projects(client: GitLabClient, args: i.ListGroupProjectsInput) -> list[GitLabProject]:
  data = await client.get(f"/groups/{project_path(args.group_id)}/projects", **query(args, "group_id"))
  return parse_list(GitLabProject, data)
