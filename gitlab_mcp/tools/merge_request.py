"""
Merge request tools (8 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

merge_request_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="create_merge_request",
    description="Create a new merge request in a GitLab project",
    input_model=i.CreateMergeRequestInput,
  ),
  ToolDescriptor(
    name="get_merge_request",
    description="Get details of a merge request (Either merge_request_iid or source_branch must be provided)",
    input_model=i.GetMergeRequestInput,
  ),
  ToolDescriptor(
    name="get_merge_request_diffs",
    description="Get the changes/diffs of a merge request (Either merge_request_iid or source_branch must be provided)",
    input_model=i.GetMergeRequestDiffsInput,
  ),
  ToolDescriptor(
    name="update_merge_request",
    description="Update a merge request (Either merge_request_iid or source_branch must be provided)",
    input_model=i.UpdateMergeRequestInput,
  ),
  ToolDescriptor(
    name="list_merge_requests",
    description="List merge requests in a GitLab project with filtering options",
    input_model=i.ListMergeRequestsInput,
  ),
  ToolDescriptor(
    name="create_note",
    description="Create a new note (comment) to an issue or merge request",
    input_model=i.CreateNoteInput,
  ),
  ToolDescriptor(
    name="mr_discussions",
    description="List discussion items for a merge request",
    input_model=i.ListMergeRequestDiscussionsInput,
  ),
  ToolDescriptor(
    name="update_merge_request_note",
    description="Modify an existing merge request thread note",
    input_model=i.UpdateMergeRequestNoteInput,
  ),
]
