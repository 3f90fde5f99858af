"""
Namespace tools (3 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

namespace_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="list_namespaces",
    description="List all namespaces available to the current user",
    input_model=i.ListNamespacesInput,
  ),
  ToolDescriptor(
    name="get_namespace",
    description="Get details of a namespace by ID or path",
    input_model=i.GetNamespaceInput,
  ),
  ToolDescriptor(
    name="verify_namespace",
    description="Verify if a namespace path exists",
    input_model=i.VerifyNamespaceInput,
  ),
]
