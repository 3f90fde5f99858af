"""
Repository tools (8 tools).
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

repository_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="create_or_update_file",
    description="Create or update a single file in a GitLab project",
    input_model=i.CreateOrUpdateFileInput,
  ),
  ToolDescriptor(
    name="search_repositories",
    description="Search for GitLab projects",
    input_model=i.SearchRepositoriesInput,
  ),
  ToolDescriptor(
    name="create_repository",
    description="Create a new GitLab project",
    input_model=i.CreateRepositoryInput,
  ),
  ToolDescriptor(
    name="get_file_contents",
    description="Get the contents of a file or directory from a GitLab project",
    input_model=i.GetFileContentsInput,
  ),
  ToolDescriptor(
    name="push_files",
    description="Push multiple files to a GitLab project in a single commit",
    input_model=i.PushFilesInput,
  ),
  ToolDescriptor(
    name="fork_repository",
    description="Fork a GitLab project to your account or specified namespace",
    input_model=i.ForkRepositoryInput,
  ),
  ToolDescriptor(
    name="create_branch",
    description="Create a new branch in a GitLab project",
    input_model=i.CreateBranchInput,
  ),
  ToolDescriptor(
    name="get_repository_tree",
    description="Get the repository tree for a GitLab project (list files and directories)",
    input_model=i.GetRepositoryTreeInput,
  ),
]
