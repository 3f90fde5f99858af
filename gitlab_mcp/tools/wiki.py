"""
Wiki tools (5 tools). Listed only when USE_GITLAB_WIKI=true.
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

wiki_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="list_wiki_pages",
    description="List wiki pages in a GitLab project",
    input_model=i.ListWikiPagesInput,
  ),
  ToolDescriptor(
    name="get_wiki_page",
    description="Get details of a specific wiki page",
    input_model=i.GetWikiPageInput,
  ),
  ToolDescriptor(
    name="create_wiki_page",
    description="Create a new wiki page in a GitLab project",
    input_model=i.CreateWikiPageInput,
  ),
  ToolDescriptor(
    name="update_wiki_page",
    description="Update an existing wiki page in a GitLab project",
    input_model=i.UpdateWikiPageInput,
  ),
  ToolDescriptor(
    name="delete_wiki_page",
    description="Delete a wiki page from a GitLab project",
    input_model=i.DeleteWikiPageInput,
  ),
]
