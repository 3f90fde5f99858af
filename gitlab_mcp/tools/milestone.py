"""
Milestone tools (9 tools). Listed only when USE_MILESTONE=true.
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

milestone_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="list_milestones",
    description="List milestones in a GitLab project with filtering options",
    input_model=i.ListMilestonesInput,
  ),
  ToolDescriptor(
    name="get_milestone",
    description="Get details of a specific milestone",
    input_model=i.GetMilestoneInput,
  ),
  ToolDescriptor(
    name="create_milestone",
    description="Create a new milestone in a GitLab project",
    input_model=i.CreateMilestoneInput,
  ),
  ToolDescriptor(
    name="edit_milestone",
    description="Edit an existing milestone in a GitLab project",
    input_model=i.EditMilestoneInput,
  ),
  ToolDescriptor(
    name="delete_milestone",
    description="Delete a milestone from a GitLab project",
    input_model=i.DeleteMilestoneInput,
  ),
  ToolDescriptor(
    name="get_milestone_issue",
    description="Get issues associated with a specific milestone",
    input_model=i.GetMilestoneIssuesInput,
  ),
  ToolDescriptor(
    name="get_milestone_merge_requests",
    description="Get merge requests associated with a specific milestone",
    input_model=i.GetMilestoneMergeRequestsInput,
  ),
  ToolDescriptor(
    name="promote_milestone",
    description="Promote a project milestone to a group milestone",
    input_model=i.PromoteMilestoneInput,
  ),
  ToolDescriptor(
    name="get_milestone_burndown_events",
    description="Get burndown events for a specific milestone",
    input_model=i.GetMilestoneBurndownEventsInput,
  ),
]
