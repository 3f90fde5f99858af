"""
Issue tools (9 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

issue_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="create_issue",
    description="Create a new issue in a GitLab project",
    input_model=i.CreateIssueInput,
  ),
  ToolDescriptor(
    name="list_issues",
    description="List issues in a GitLab project with filtering options",
    input_model=i.ListIssuesInput,
  ),
  ToolDescriptor(
    name="get_issue",
    description="Get details of a specific issue in a GitLab project",
    input_model=i.GetIssueInput,
  ),
  ToolDescriptor(
    name="update_issue",
    description="Update an issue in a GitLab project",
    input_model=i.UpdateIssueInput,
  ),
  ToolDescriptor(
    name="delete_issue",
    description="Delete an issue from a GitLab project",
    input_model=i.DeleteIssueInput,
  ),
  ToolDescriptor(
    name="list_issue_links",
    description="List all issue links for a specific issue",
    input_model=i.ListIssueLinksInput,
  ),
  ToolDescriptor(
    name="get_issue_link",
    description="Get a specific issue link",
    input_model=i.GetIssueLinkInput,
  ),
  ToolDescriptor(
    name="create_issue_link",
    description="Create an issue link between two issues",
    input_model=i.CreateIssueLinkInput,
  ),
  ToolDescriptor(
    name="delete_issue_link",
    description="Delete an issue link",
    input_model=i.DeleteIssueLinkInput,
  ),
]
