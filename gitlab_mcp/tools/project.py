"""
Project tools (3 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

project_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="get_project",
    description="Get details of a specific project",
    input_model=i.GetProjectInput,
  ),
  ToolDescriptor(
    name="list_projects",
    description="List projects accessible by the current user",
    input_model=i.ListProjectsInput,
  ),
  ToolDescriptor(
    name="list_group_projects",
    description="List projects in a GitLab group with filtering options",
    input_model=i.ListGroupProjectsInput,
  ),
]
