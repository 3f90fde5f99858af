"""
Visibility filter: reduces the catalog to the tools listed for a process.

Each optional group is removed when its mode flag is off, and read-only
mode keeps only members of the read-only group. Filters combine by
intersection.

Filtering is advisory. It shapes tools/list only, and the gateway will
still dispatch a hidden tool to a caller that already knows its name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from .config import ModeFlags

log = logging.getLogger("gitlab_mcp.visibility")


class _Named(Protocol):
  @property
  def name(self) -> str: ...


T = TypeVar("T", bound=_Named)


@dataclass(frozen=True)
class ToolGroup:
  name: str
  description: str
  tools: frozenset[str]


READ_ONLY_GROUP = ToolGroup(
  name="read_only",
  description="Tools that never modify GitLab state",
  tools=frozenset(
    {
      "search_repositories",
      "get_file_contents",
      "get_repository_tree",
      "get_merge_request",
      "get_merge_request_diffs",
      "list_merge_requests",
      "mr_discussions",
      "list_issues",
      "get_issue",
      "list_issue_links",
      "get_issue_link",
      "list_namespaces",
      "get_namespace",
      "verify_namespace",
      "get_project",
      "list_projects",
      "list_group_projects",
      "list_labels",
      "get_label",
      "list_wiki_pages",
      "get_wiki_page",
      "list_pipelines",
      "get_pipeline",
      "list_pipeline_jobs",
      "get_pipeline_job",
      "get_pipeline_job_output",
      "list_milestones",
      "get_milestone",
      "get_milestone_issue",
      "get_milestone_merge_requests",
      "get_milestone_burndown_events",
    }
  ),
)

WIKI_GROUP = ToolGroup(
  name="wiki",
  description="Project wiki pages",
  tools=frozenset(
    {
      "list_wiki_pages",
      "get_wiki_page",
      "create_wiki_page",
      "update_wiki_page",
      "delete_wiki_page",
      "upload_wiki_attachment",
    }
  ),
)

PIPELINE_GROUP = ToolGroup(
  name="pipeline",
  description="CI/CD pipelines and jobs",
  tools=frozenset(
    {
      "list_pipelines",
      "get_pipeline",
      "list_pipeline_jobs",
      "get_pipeline_job",
      "get_pipeline_job_output",
      "create_pipeline",
      "retry_pipeline",
      "cancel_pipeline",
    }
  ),
)

MILESTONE_GROUP = ToolGroup(
  name="milestone",
  description="Project milestones",
  tools=frozenset(
    {
      "list_milestones",
      "get_milestone",
      "create_milestone",
      "edit_milestone",
      "delete_milestone",
      "get_milestone_issue",
      "get_milestone_merge_requests",
      "promote_milestone",
      "get_milestone_burndown_events",
    }
  ),
)

# Optional group name -> ModeFlags attribute that enables it
FEATURE_GROUPS: dict[str, str] = {
  WIKI_GROUP.name: "wiki_enabled",
  PIPELINE_GROUP.name: "pipeline_enabled",
  MILESTONE_GROUP.name: "milestone_enabled",
}

DEFAULT_GROUPS: tuple[ToolGroup, ...] = (READ_ONLY_GROUP, WIKI_GROUP, PIPELINE_GROUP, MILESTONE_GROUP)


def _excluded_names(flags: ModeFlags, groups: Iterable[ToolGroup]) -> set[str]:
  excluded: set[str] = set()
  for group in groups:
    if group.name == READ_ONLY_GROUP.name:
      continue
    flag = FEATURE_GROUPS.get(group.name)
    if flag is None:
      log.debug("Ignoring unrecognised tool group '%s'", group.name)
      continue
    if not getattr(flags, flag):
      excluded.update(group.tools)
  return excluded


def filter_tools(
  tools: Sequence[T],
  flags: ModeFlags,
  groups: Iterable[ToolGroup] = DEFAULT_GROUPS,
) -> list[T]:
  """Return the tools visible under flags, in catalog order."""
  groups = tuple(groups)
  excluded = _excluded_names(flags, groups)
  allowed: frozenset[str] | None = None
  if flags.read_only:
    allowed = next((g.tools for g in groups if g.name == READ_ONLY_GROUP.name), frozenset())

  return [
    t for t in tools if t.name not in excluded and (allowed is None or t.name in allowed)
  ]
