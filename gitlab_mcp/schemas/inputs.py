"""
Input shapes for every GitLab tool.

Each model is both the validator for tools/call arguments and the source
of the JSON Schema advertised by tools/list.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

IssueLinkType = Literal["relates_to", "blocks", "is_blocked_by"]
Visibility = Literal["private", "internal", "public"]


class ToolInput(BaseModel):
  model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ProjectInput(ToolInput):
  project_id: str = Field(description="Project ID or URL-encoded path")


class PaginationInput(ToolInput):
  page: int | None = Field(None, ge=1, description="Page number for pagination")
  per_page: int | None = Field(None, ge=1, le=100, description="Number of items per page")


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class CreateOrUpdateFileInput(ProjectInput):
  file_path: str = Field(description="Path where to create/update the file")
  content: str = Field(description="Content of the file")
  commit_message: str = Field(description="Commit message")
  branch: str = Field(description="Branch to create/update the file in")
  previous_path: str | None = Field(None, description="Path of the file to move/rename")
  last_commit_id: str | None = Field(None, description="Last known file commit ID")
  commit_id: str | None = Field(None, description="Current file commit ID (for update operations)")


class SearchRepositoriesInput(ToolInput):
  search: str = Field(description="Search query")
  page: int = Field(1, ge=1, description="Page number for pagination (default: 1)")
  per_page: int = Field(20, ge=1, le=100, description="Number of results per page (default: 20)")


class CreateRepositoryInput(ToolInput):
  name: str = Field(min_length=1, description="Repository name")
  description: str | None = Field(None, description="Repository description")
  visibility: Visibility | None = Field(None, description="Repository visibility level")
  initialize_with_readme: bool | None = Field(None, description="Initialize with README.md")


class GetFileContentsInput(ProjectInput):
  file_path: str = Field(description="Path to the file or directory")
  ref: str | None = Field(None, description="Branch/tag/commit to get contents from")


class PushFileEntry(ToolInput):
  file_path: str = Field(description="Path where to create the file")
  content: str = Field(description="Content of the file")


class PushFilesInput(ProjectInput):
  branch: str = Field(description="Branch to push to")
  files: list[PushFileEntry] = Field(min_length=1, description="Array of files to push")
  commit_message: str = Field(description="Commit message")


class ForkRepositoryInput(ProjectInput):
  namespace: str | None = Field(None, description="Namespace to fork to (full path)")


class CreateBranchInput(ProjectInput):
  branch: str = Field(description="Name for the new branch")
  ref: str | None = Field(None, description="Source branch/commit for new branch")


class GetRepositoryTreeInput(ProjectInput):
  path: str | None = Field(None, description="The path inside the repository")
  ref: str | None = Field(None, description="The name of a repository branch or tag")
  recursive: bool | None = Field(None, description="Get a recursive tree")
  per_page: int | None = Field(None, ge=1, le=100, description="Number of results per page")
  page_token: str | None = Field(None, description="The tree record ID for keyset pagination")
  pagination: str | None = Field(None, description="Use 'keyset' for keyset pagination")


# ---------------------------------------------------------------------------
# Merge requests
# ---------------------------------------------------------------------------


class MergeRequestLookupInput(ProjectInput):
  merge_request_iid: int | None = Field(None, description="The internal ID of the merge request")
  source_branch: str | None = Field(None, description="Source branch name, used when the IID is unknown")

  @model_validator(mode="after")
  def _iid_or_branch(self) -> MergeRequestLookupInput:
    if self.merge_request_iid is None and not self.source_branch:
      raise ValueError("Either merge_request_iid or source_branch must be provided")
    return self


class GetMergeRequestInput(MergeRequestLookupInput):
  pass


class GetMergeRequestDiffsInput(MergeRequestLookupInput):
  view: Literal["inline", "parallel"] | None = Field(None, description="Diff view type")


class UpdateMergeRequestInput(MergeRequestLookupInput):
  title: str | None = Field(None, description="The title of the merge request")
  description: str | None = Field(None, description="The description of the merge request")
  target_branch: str | None = Field(None, description="The target branch")
  assignee_ids: list[int] | None = Field(None, description="The ID of the users to assign the MR to")
  labels: list[str] | None = Field(None, description="Labels for the MR")
  state_event: Literal["close", "reopen"] | None = Field(None, description="New state (close/reopen) for the MR")
  remove_source_branch: bool | None = Field(None, description="Flag indicating if the source branch should be removed")
  squash: bool | None = Field(None, description="Squash commits into a single commit when merging")
  draft: bool | None = Field(None, description="Work in progress merge request")


class CreateMergeRequestInput(ProjectInput):
  title: str = Field(description="Merge request title")
  description: str | None = Field(None, description="Merge request description")
  source_branch: str = Field(description="Branch containing changes")
  target_branch: str = Field(description="Branch to merge into")
  draft: bool | None = Field(None, description="Create as draft merge request")
  allow_collaboration: bool | None = Field(None, description="Allow commits from upstream members")


class ListMergeRequestsInput(ProjectInput, PaginationInput):
  state: Literal["opened", "closed", "locked", "merged", "all"] | None = Field(
    None, description="Return merge requests with a specific state"
  )
  scope: Literal["created_by_me", "assigned_to_me", "all"] | None = Field(
    None, description="Return merge requests from a specific scope"
  )
  author_username: str | None = Field(None, description="Return merge requests created by the given username")
  assignee_username: str | None = Field(None, description="Return merge requests assigned to the given username")
  reviewer_username: str | None = Field(None, description="Return merge requests reviewed by the given username")
  labels: list[str] | None = Field(None, description="Array of label names")
  source_branch: str | None = Field(None, description="Return merge requests with the given source branch")
  target_branch: str | None = Field(None, description="Return merge requests with the given target branch")
  search: str | None = Field(None, description="Search title and description")
  order_by: Literal["created_at", "updated_at"] | None = Field(None, description="Order results by field")
  sort: Literal["asc", "desc"] | None = Field(None, description="Sort direction")


class CreateNoteInput(ProjectInput):
  noteable_type: Literal["issue", "merge_request"] = Field(description="Type of noteable (issue or merge_request)")
  noteable_iid: int = Field(description="IID of the issue or merge request")
  body: str = Field(description="Note content")


class ListMergeRequestDiscussionsInput(ProjectInput):
  merge_request_iid: int = Field(description="The internal ID of the merge request")


class UpdateMergeRequestNoteInput(ProjectInput):
  merge_request_iid: int = Field(description="The IID of a merge request")
  discussion_id: str = Field(description="The ID of a thread")
  note_id: int = Field(description="The ID of a thread note")
  body: str | None = Field(None, description="The content of the note or reply")
  resolved: bool | None = Field(None, description="Resolve or unresolve the note")

  @model_validator(mode="after")
  def _body_xor_resolved(self) -> UpdateMergeRequestNoteInput:
    if (self.body is None) == (self.resolved is None):
      raise ValueError("Exactly one of body or resolved must be provided")
    return self


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------


class CreateIssueInput(ProjectInput):
  title: str = Field(description="Issue title")
  description: str | None = Field(None, description="Issue description")
  assignee_ids: list[int] | None = Field(None, description="Array of user IDs to assign")
  labels: list[str] | None = Field(None, description="Array of label names")
  milestone_id: int | None = Field(None, description="Milestone ID to assign")


class ListIssuesInput(ProjectInput, PaginationInput):
  assignee_id: int | None = Field(None, description="Return issues assigned to the given user ID")
  assignee_username: str | None = Field(None, description="Return issues assigned to the given username")
  author_id: int | None = Field(None, description="Return issues created by the given user ID")
  author_username: str | None = Field(None, description="Return issues created by the given username")
  confidential: bool | None = Field(None, description="Filter confidential or public issues")
  created_after: str | None = Field(None, description="Return issues created after the given time")
  created_before: str | None = Field(None, description="Return issues created before the given time")
  due_date: str | None = Field(None, description="Return issues that have the due date")
  label_name: list[str] | None = Field(None, description="Array of label names")
  milestone: str | None = Field(None, description="Milestone title")
  scope: Literal["created-by-me", "assigned-to-me", "all"] | None = Field(
    None, description="Return issues from a specific scope"
  )
  search: str | None = Field(None, description="Search for specific terms")
  state: Literal["opened", "closed", "all"] | None = Field(None, description="Return issues with a specific state")
  updated_after: str | None = Field(None, description="Return issues updated after the given time")
  updated_before: str | None = Field(None, description="Return issues updated before the given time")
  with_labels_details: bool | None = Field(None, description="Return more details for each label")


class IssueInput(ProjectInput):
  issue_iid: int = Field(description="The internal ID of the project issue")


class GetIssueInput(IssueInput):
  pass


class DeleteIssueInput(IssueInput):
  pass


class ListIssueLinksInput(IssueInput):
  pass


class UpdateIssueInput(IssueInput):
  title: str | None = Field(None, description="The title of the issue")
  description: str | None = Field(None, description="The description of the issue")
  assignee_ids: list[int] | None = Field(None, description="Array of user IDs to assign issue to")
  confidential: bool | None = Field(None, description="Set the issue to be confidential")
  discussion_locked: bool | None = Field(None, description="Flag to lock discussions")
  due_date: str | None = Field(None, description="Date the issue is due (YYYY-MM-DD)")
  labels: list[str] | None = Field(None, description="Array of label names")
  milestone_id: int | None = Field(None, description="Milestone ID to assign")
  state_event: Literal["close", "reopen"] | None = Field(None, description="Update issue state (close/reopen)")
  weight: int | None = Field(None, ge=0, description="Weight of the issue")


class IssueLinkInput(IssueInput):
  issue_link_id: int = Field(description="ID of an issue relationship")


class GetIssueLinkInput(IssueLinkInput):
  pass


class DeleteIssueLinkInput(IssueLinkInput):
  pass


class CreateIssueLinkInput(IssueInput):
  target_project_id: str = Field(description="The ID or URL-encoded path of a target project")
  target_issue_iid: int = Field(description="The internal ID of a target project's issue")
  link_type: IssueLinkType = Field("relates_to", description="The type of the relation, defaults to relates_to")


# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------


class ListNamespacesInput(PaginationInput):
  search: str | None = Field(None, description="Search term for namespaces")
  owned: bool | None = Field(None, description="Filter for namespaces owned by current user")


class GetNamespaceInput(ToolInput):
  namespace_id: str = Field(description="Namespace ID or full path")


class VerifyNamespaceInput(ToolInput):
  path: str = Field(description="Namespace path to verify")
  parent_id: int | None = Field(None, description="The ID of the parent namespace")


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class GetProjectInput(ProjectInput):
  license: bool | None = Field(None, description="Include project license data")
  statistics: bool | None = Field(None, description="Include project statistics")
  with_custom_attributes: bool | None = Field(None, description="Include custom attributes in response")


class ListProjectsInput(PaginationInput):
  search: str | None = Field(None, description="Search term for projects")
  owned: bool | None = Field(None, description="Filter for projects owned by current user")
  membership: bool | None = Field(None, description="Filter for projects where current user is a member")
  simple: bool | None = Field(None, description="Return only limited fields")
  archived: bool | None = Field(None, description="Filter for archived projects")
  visibility: Visibility | None = Field(None, description="Filter by project visibility")
  order_by: Literal["id", "name", "path", "created_at", "updated_at", "last_activity_at"] | None = Field(
    None, description="Return projects ordered by field"
  )
  sort: Literal["asc", "desc"] | None = Field(
    None, description="Return projects sorted in ascending or descending order"
  )
  with_issues_enabled: bool | None = Field(None, description="Filter projects with issues feature enabled")
  with_merge_requests_enabled: bool | None = Field(
    None, description="Filter projects with merge requests feature enabled"
  )
  min_access_level: int | None = Field(None, description="Filter by minimum access level")


class ListGroupProjectsInput(PaginationInput):
  group_id: str = Field(description="Group ID or path")
  include_subgroups: bool | None = Field(None, description="Include projects from subgroups")
  search: str | None = Field(None, description="Search term to filter projects")
  order_by: Literal["name", "path", "created_at", "updated_at", "last_activity_at"] | None = Field(
    None, description="Field to sort by"
  )
  sort: Literal["asc", "desc"] | None = Field(None, description="Sort direction")
  archived: bool | None = Field(None, description="Filter for archived projects")
  visibility: Visibility | None = Field(None, description="Filter by project visibility")
  with_issues_enabled: bool | None = Field(None, description="Filter projects with issues feature enabled")
  with_merge_requests_enabled: bool | None = Field(
    None, description="Filter projects with merge requests feature enabled"
  )
  min_access_level: int | None = Field(None, description="Filter by minimum access level")
  with_programming_language: str | None = Field(None, description="Filter by programming language")
  starred: bool | None = Field(None, description="Filter by starred projects")
  statistics: bool | None = Field(None, description="Include project statistics")
  with_custom_attributes: bool | None = Field(None, description="Include custom attributes")
  with_security_reports: bool | None = Field(None, description="Include security reports")


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------


class ListLabelsInput(ProjectInput):
  with_counts: bool | None = Field(None, description="Whether or not to include issue and merge request counts")
  include_ancestor_groups: bool | None = Field(None, description="Include ancestor groups")
  search: str | None = Field(None, description="Keyword to filter labels by")


class LabelInput(ProjectInput):
  label_id: int | str = Field(description="The ID or title of a project's label")


class GetLabelInput(LabelInput):
  include_ancestor_groups: bool | None = Field(None, description="Include ancestor groups")


class DeleteLabelInput(LabelInput):
  pass


class CreateLabelInput(ProjectInput):
  name: str = Field(description="The name of the label")
  color: str = Field(description="The color of the label given in 6-digit hex notation with leading '#' sign")
  description: str | None = Field(None, description="The description of the label")
  priority: int | None = Field(None, description="The priority of the label")


class UpdateLabelInput(LabelInput):
  new_name: str | None = Field(None, description="The new name of the label")
  color: str | None = Field(
    None, description="The color of the label given in 6-digit hex notation with leading '#' sign"
  )
  description: str | None = Field(None, description="The new description of the label")
  priority: int | None = Field(None, description="The new priority of the label")


# ---------------------------------------------------------------------------
# Wiki
# ---------------------------------------------------------------------------

WikiFormat = Literal["markdown", "rdoc", "asciidoc", "org"]


class ListWikiPagesInput(ProjectInput, PaginationInput):
  with_content: bool | None = Field(None, description="Include the content of each page")


class WikiPageInput(ProjectInput):
  slug: str = Field(description="URL-encoded slug of the wiki page")


class GetWikiPageInput(WikiPageInput):
  pass


class DeleteWikiPageInput(WikiPageInput):
  pass


class CreateWikiPageInput(ProjectInput):
  title: str = Field(description="Title of the wiki page")
  content: str = Field(description="Content of the wiki page")
  format: WikiFormat | None = Field(None, description="Content format, e.g. markdown, rdoc")


class UpdateWikiPageInput(WikiPageInput):
  title: str | None = Field(None, description="New title of the wiki page")
  content: str | None = Field(None, description="New content of the wiki page")
  format: WikiFormat | None = Field(None, description="Content format, e.g. markdown, rdoc")


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------

PipelineStatus = Literal[
  "created",
  "waiting_for_resource",
  "preparing",
  "pending",
  "running",
  "success",
  "failed",
  "canceled",
  "skipped",
  "manual",
  "scheduled",
]


class ListPipelinesInput(ProjectInput, PaginationInput):
  scope: Literal["running", "pending", "finished", "branches", "tags"] | None = Field(
    None, description="The scope of pipelines"
  )
  status: PipelineStatus | None = Field(None, description="The status of pipelines")
  ref: str | None = Field(None, description="The ref of pipelines")
  sha: str | None = Field(None, description="The SHA of pipelines")
  yaml_errors: bool | None = Field(None, description="Returns pipelines with invalid configurations")
  username: str | None = Field(None, description="The username of the user who triggered pipelines")
  updated_after: str | None = Field(None, description="Return pipelines updated after the specified date")
  updated_before: str | None = Field(None, description="Return pipelines updated before the specified date")
  order_by: Literal["id", "status", "ref", "updated_at", "user_id"] | None = Field(
    None, description="Order pipelines by"
  )
  sort: Literal["asc", "desc"] | None = Field(None, description="Sort pipelines")


class PipelineInput(ProjectInput):
  pipeline_id: int = Field(description="The ID of the pipeline")


class GetPipelineInput(PipelineInput):
  pass


class RetryPipelineInput(PipelineInput):
  pass


class CancelPipelineInput(PipelineInput):
  pass


class ListPipelineJobsInput(PipelineInput, PaginationInput):
  scope: Literal["created", "pending", "running", "failed", "success", "canceled", "skipped", "manual"] | None = (
    Field(None, description="The scope of jobs to show")
  )
  include_retried: bool | None = Field(None, description="Whether to include retried jobs")


class JobInput(ProjectInput):
  job_id: int = Field(description="The ID of the job")


class GetPipelineJobInput(JobInput):
  pass


class GetPipelineJobOutputInput(JobInput):
  pass


class PipelineVariable(ToolInput):
  key: str = Field(description="The key of the variable")
  value: str = Field(description="The value of the variable")
  variable_type: Literal["env_var", "file"] | None = Field(None, description="The type of the variable")


class CreatePipelineInput(ProjectInput):
  ref: str = Field(description="The branch or tag to run the pipeline on")
  variables: list[PipelineVariable] | None = Field(None, description="Variables available in the pipeline")


# ---------------------------------------------------------------------------
# Milestones
# ---------------------------------------------------------------------------


class ListMilestonesInput(ProjectInput, PaginationInput):
  iids: list[int] | None = Field(None, description="Return only the milestones having the given iid")
  state: Literal["active", "closed"] | None = Field(None, description="Return only active or closed milestones")
  title: str | None = Field(None, description="Return only milestones with a title matching the provided string")
  search: str | None = Field(None, description="Return only milestones with a title or description matching the provided string")
  include_ancestors: bool | None = Field(None, description="Include ancestor groups")
  updated_before: str | None = Field(None, description="Return milestones updated before the specified date")
  updated_after: str | None = Field(None, description="Return milestones updated after the specified date")


class MilestoneInput(ProjectInput):
  milestone_id: int = Field(description="The ID of a project milestone")


class GetMilestoneInput(MilestoneInput):
  pass


class DeleteMilestoneInput(MilestoneInput):
  pass


class PromoteMilestoneInput(MilestoneInput):
  pass


class GetMilestoneBurndownEventsInput(MilestoneInput):
  pass


class GetMilestoneIssuesInput(MilestoneInput, PaginationInput):
  pass


class GetMilestoneMergeRequestsInput(MilestoneInput, PaginationInput):
  pass


class CreateMilestoneInput(ProjectInput):
  title: str = Field(description="The title of the milestone")
  description: str | None = Field(None, description="The description of the milestone")
  due_date: str | None = Field(None, description="The due date of the milestone (YYYY-MM-DD)")
  start_date: str | None = Field(None, description="The start date of the milestone (YYYY-MM-DD)")


class EditMilestoneInput(MilestoneInput):
  title: str | None = Field(None, description="The title of the milestone")
  description: str | None = Field(None, description="The description of the milestone")
  due_date: str | None = Field(None, description="The due date of the milestone (YYYY-MM-DD)")
  start_date: str | None = Field(None, description="The start date of the milestone (YYYY-MM-DD)")
  state_event: Literal["close", "activate"] | None = Field(None, description="The state event of the milestone")
