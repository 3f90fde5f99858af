"""
GitLab tool catalog organized by domain.

Each module exports a list of ToolDescriptor objects that are combined into
ALL_TOOLS. The order here is the order tools/list reports them in.
"""

from __future__ import annotations

from .descriptor import ToolDescriptor
from .issue import issue_tools
from .label import label_tools
from .merge_request import merge_request_tools
from .milestone import milestone_tools
from .namespace import namespace_tools
from .pipeline import pipeline_tools
from .project import project_tools
from .repository import repository_tools
from .wiki import wiki_tools

ALL_TOOLS: list[ToolDescriptor] = [
  *repository_tools,
  *merge_request_tools,
  *issue_tools,
  *namespace_tools,
  *project_tools,
  *label_tools,
  *wiki_tools,
  *pipeline_tools,
  *milestone_tools,
]


def list_all() -> tuple[ToolDescriptor, ...]:
  return tuple(ALL_TOOLS)


__all__ = ["ALL_TOOLS", "ToolDescriptor", "list_all"]
