"""
Label tools (5 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

label_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="list_labels",
    description="List labels for a project",
    input_model=i.ListLabelsInput,
  ),
  ToolDescriptor(
    name="get_label",
    description="Get a single label from a project",
    input_model=i.GetLabelInput,
  ),
  ToolDescriptor(
    name="create_label",
    description="Create a new label in a project",
    input_model=i.CreateLabelInput,
  ),
  ToolDescriptor(
    name="update_label",
    description="Update an existing label in a project",
    input_model=i.UpdateLabelInput,
  ),
  ToolDescriptor(
    name="delete_label",
    description="Delete a label from a project",
    input_model=i.DeleteLabelInput,
  ),
]
