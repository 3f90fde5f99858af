"""Label domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, encode_segment, project_path
from ..helpers import deleted, parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabLabel


def _labels(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}/labels"


async def list_labels(client: GitLabClient, args: i.ListLabelsInput) -> list[GitLabLabel]:
  data = await client.get(_labels(args.project_id), **query(args, "project_id"))
  return parse_list(GitLabLabel, data)


async def get_label(client: GitLabClient, args: i.GetLabelInput) -> GitLabLabel:
  data = await client.get(
    f"{_labels(args.project_id)}/{encode_segment(args.label_id)}",
    include_ancestor_groups=args.include_ancestor_groups,
  )
  return parse(GitLabLabel, data)


async def create_label(client: GitLabClient, args: i.CreateLabelInput) -> GitLabLabel:
  data = await client.post(_labels(args.project_id), json=query(args, "project_id"))
  return parse(GitLabLabel, data)


async def update_label(client: GitLabClient, args: i.UpdateLabelInput) -> GitLabLabel:
  data = await client.put(
    f"{_labels(args.project_id)}/{encode_segment(args.label_id)}",
    json=query(args, "project_id", "label_id"),
  )
  return parse(GitLabLabel, data)


async def delete_label(client: GitLabClient, args: i.DeleteLabelInput) -> dict:
  await client.delete(f"{_labels(args.project_id)}/{encode_segment(args.label_id)}")
  return deleted("Label")
