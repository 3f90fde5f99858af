"""Wiki domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, encode_segment, project_path
from ..helpers import deleted, parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabWikiPage


def _wikis(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}/wikis"


async def list_wiki_pages(client: GitLabClient, args: i.ListWikiPagesInput) -> list[GitLabWikiPage]:
  data = await client.get(_wikis(args.project_id), **query(args, "project_id"))
  return parse_list(GitLabWikiPage, data)


async def get_wiki_page(client: GitLabClient, args: i.GetWikiPageInput) -> GitLabWikiPage:
  data = await client.get(f"{_wikis(args.project_id)}/{encode_segment(args.slug)}")
  return parse(GitLabWikiPage, data)


async def create_wiki_page(client: GitLabClient, args: i.CreateWikiPageInput) -> GitLabWikiPage:
  data = await client.post(_wikis(args.project_id), json=query(args, "project_id"))
  return parse(GitLabWikiPage, data)


async def update_wiki_page(client: GitLabClient, args: i.UpdateWikiPageInput) -> GitLabWikiPage:
  data = await client.put(
    f"{_wikis(args.project_id)}/{encode_segment(args.slug)}",
    json=query(args, "project_id", "slug"),
  )
  return parse(GitLabWikiPage, data)


async def delete_wiki_page(client: GitLabClient, args: i.DeleteWikiPageInput) -> dict:
  await client.delete(f"{_wikis(args.project_id)}/{encode_segment(args.slug)}")
  return deleted("Wiki page")
