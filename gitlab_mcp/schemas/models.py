"""
Response models for GitLab resources.

Unknown fields returned by GitLab are dropped. Only the identifying fields
of each resource are required, since GitLab omits many attributes depending
on the endpoint, the instance version and the caller's permissions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class GitLabModel(BaseModel):
  model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Users / namespaces
# ---------------------------------------------------------------------------


class GitLabUser(GitLabModel):
  id: int
  username: str
  name: str | None = None
  state: str | None = None
  avatar_url: str | None = None
  web_url: str | None = None


class GitLabNamespace(GitLabModel):
  id: int
  name: str
  path: str
  kind: Literal["user", "group"]
  full_path: str
  parent_id: int | None = None
  avatar_url: str | None = None
  web_url: str | None = None
  members_count_with_descendants: int | None = None
  billable_members_count: int | None = None
  max_seats_used: int | None = None
  seats_in_use: int | None = None
  plan: str | None = None
  end_date: str | None = None
  trial_ends_on: str | None = None
  trial: bool | None = None
  root_repository_size: int | None = None
  projects_count: int | None = None


class GitLabNamespaceExistsResponse(GitLabModel):
  exists: bool
  suggests: list[str] | None = None


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class GitLabProjectNamespace(GitLabModel):
  id: int
  name: str
  path: str
  kind: str
  full_path: str
  avatar_url: str | None = None
  web_url: str | None = None


class GitLabAccess(GitLabModel):
  access_level: int
  notification_level: int | None = None


class GitLabPermissions(GitLabModel):
  project_access: GitLabAccess | None = None
  group_access: GitLabAccess | None = None


class GitLabSharedGroup(GitLabModel):
  group_id: int
  group_name: str
  group_full_path: str
  group_access_level: int


class GitLabProject(GitLabModel):
  id: int
  name: str
  path_with_namespace: str
  description: str | None = None
  visibility: str | None = None
  owner: GitLabUser | None = None
  web_url: str | None = None
  fork: bool | None = None
  ssh_url_to_repo: str | None = None
  http_url_to_repo: str | None = None
  created_at: str | None = None
  last_activity_at: str | None = None
  default_branch: str | None = None
  namespace: GitLabProjectNamespace | None = None
  readme_url: str | None = None
  topics: list[str] | None = None
  tag_list: list[str] | None = None
  open_issues_count: int | None = None
  archived: bool | None = None
  forks_count: int | None = None
  star_count: int | None = None
  permissions: GitLabPermissions | None = None
  container_registry_enabled: bool | None = None
  container_registry_access_level: str | None = None
  issues_enabled: bool | None = None
  merge_requests_enabled: bool | None = None
  wiki_enabled: bool | None = None
  jobs_enabled: bool | None = None
  snippets_enabled: bool | None = None
  can_create_merge_request_in: bool | None = None
  resolve_outdated_diff_discussions: bool | None = None
  shared_runners_enabled: bool | None = None
  shared_with_groups: list[GitLabSharedGroup] | None = None
  statistics: dict[str, Any] | None = None
  license: dict[str, Any] | None = None


class GitLabForkParent(GitLabModel):
  name: str
  path_with_namespace: str
  web_url: str | None = None
  owner: GitLabUser | None = None


class GitLabFork(GitLabProject):
  forked_from_project: GitLabForkParent | None = None


class GitLabSearchResponse(GitLabModel):
  count: int
  total_pages: int
  current_page: int
  items: list[GitLabProject]


# ---------------------------------------------------------------------------
# Repository content
# ---------------------------------------------------------------------------


class GitLabFileContent(GitLabModel):
  file_name: str
  file_path: str
  size: int
  encoding: str
  content: str
  content_sha256: str | None = None
  ref: str
  blob_id: str
  commit_id: str
  last_commit_id: str
  execute_filemode: bool | None = None


class GitLabTreeItem(GitLabModel):
  id: str
  name: str
  type: Literal["tree", "blob", "commit"]
  path: str
  mode: str


class GitLabCreateUpdateFileResponse(GitLabModel):
  file_path: str
  branch: str
  commit_id: str | None = None
  content: GitLabFileContent | None = None


class GitLabCommit(GitLabModel):
  id: str
  short_id: str
  title: str
  message: str | None = None
  author_name: str | None = None
  author_email: str | None = None
  authored_date: str | None = None
  committer_name: str | None = None
  committer_email: str | None = None
  committed_date: str | None = None
  web_url: str | None = None
  parent_ids: list[str] | None = None


class GitLabBranchCommit(GitLabModel):
  id: str
  web_url: str | None = None


class GitLabReference(GitLabModel):
  name: str
  commit: GitLabBranchCommit


# ---------------------------------------------------------------------------
# Labels / milestones
# ---------------------------------------------------------------------------


class GitLabLabel(GitLabModel):
  id: int
  name: str
  color: str
  text_color: str | None = None
  description: str | None = None
  description_html: str | None = None
  open_issues_count: int | None = None
  closed_issues_count: int | None = None
  open_merge_requests_count: int | None = None
  subscribed: bool | None = None
  priority: int | None = None
  is_project_label: bool | None = None


class GitLabMilestone(GitLabModel):
  id: int
  iid: int
  title: str
  project_id: int | None = None
  group_id: int | None = None
  description: str | None = None
  state: str | None = None
  due_date: str | None = None
  start_date: str | None = None
  created_at: str | None = None
  updated_at: str | None = None
  expired: bool | None = None
  web_url: str | None = None


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------


class GitLabReferences(GitLabModel):
  short: str
  relative: str
  full: str


class GitLabTimeStats(GitLabModel):
  time_estimate: int
  total_time_spent: int
  human_time_estimate: str | None = None
  human_total_time_spent: str | None = None


class GitLabIssue(GitLabModel):
  id: int
  iid: int
  project_id: int
  title: str
  description: str | None = None
  state: str | None = None
  author: GitLabUser | None = None
  assignees: list[GitLabUser] | None = None
  labels: list[GitLabLabel] | list[str] | None = None
  milestone: GitLabMilestone | None = None
  created_at: str | None = None
  updated_at: str | None = None
  closed_at: str | None = None
  web_url: str | None = None
  references: GitLabReferences | None = None
  time_stats: GitLabTimeStats | None = None
  confidential: bool | None = None
  due_date: str | None = None
  discussion_locked: bool | None = None
  weight: int | None = None


IssueLinkType = Literal["relates_to", "blocks", "is_blocked_by"]


class GitLabIssueWithLinkDetails(GitLabIssue):
  issue_link_id: int
  link_type: IssueLinkType
  link_created_at: str | None = None
  link_updated_at: str | None = None


class GitLabIssueLink(GitLabModel):
  source_issue: GitLabIssue
  target_issue: GitLabIssue
  link_type: IssueLinkType


# ---------------------------------------------------------------------------
# Merge requests
# ---------------------------------------------------------------------------


class GitLabMergeRequestDiffRef(GitLabModel):
  base_sha: str
  head_sha: str
  start_sha: str


class GitLabMergeRequest(GitLabModel):
  id: int
  iid: int
  project_id: int
  title: str
  description: str | None = None
  state: str
  merged: bool | None = None
  draft: bool | None = None
  author: GitLabUser | None = None
  assignees: list[GitLabUser] | None = None
  reviewers: list[GitLabUser] | None = None
  source_branch: str
  target_branch: str
  diff_refs: GitLabMergeRequestDiffRef | None = None
  web_url: str | None = None
  created_at: str | None = None
  updated_at: str | None = None
  merged_at: str | None = None
  closed_at: str | None = None
  merge_commit_sha: str | None = None
  detailed_merge_status: str | None = None
  merge_status: str | None = None
  merge_error: str | None = None
  work_in_progress: bool | None = None
  blocking_discussions_resolved: bool | None = None
  should_remove_source_branch: bool | None = None
  force_remove_source_branch: bool | None = None
  allow_collaboration: bool | None = None
  allow_maintainer_to_push: bool | None = None
  changes_count: str | None = None
  merge_when_pipeline_succeeds: bool | None = None
  squash: bool | None = None
  labels: list[str] | None = None


class GitLabMergeRequestDiff(GitLabModel):
  old_path: str
  new_path: str
  a_mode: str | None = None
  b_mode: str | None = None
  diff: str
  new_file: bool
  renamed_file: bool
  deleted_file: bool


class GitLabNotePosition(GitLabModel):
  base_sha: str | None = None
  start_sha: str | None = None
  head_sha: str | None = None
  old_path: str | None = None
  new_path: str | None = None
  position_type: str | None = None
  old_line: int | None = None
  new_line: int | None = None


class GitLabDiscussionNote(GitLabModel):
  id: int
  type: str | None = None
  body: str
  attachment: Any = None
  author: GitLabUser | None = None
  created_at: str | None = None
  updated_at: str | None = None
  system: bool | None = None
  noteable_id: int | None = None
  noteable_type: str | None = None
  noteable_iid: int | None = None
  resolvable: bool | None = None
  resolved: bool | None = None
  resolved_by: GitLabUser | None = None
  resolved_at: str | None = None
  position: GitLabNotePosition | None = None


class GitLabDiscussion(GitLabModel):
  id: str
  individual_note: bool
  notes: list[GitLabDiscussionNote]


# ---------------------------------------------------------------------------
# Wiki
# ---------------------------------------------------------------------------


class GitLabWikiPage(GitLabModel):
  title: str
  slug: str
  format: str | None = None
  content: str | None = None
  encoding: str | None = None
  created_at: str | None = None
  updated_at: str | None = None


# ---------------------------------------------------------------------------
# Pipelines / jobs
# ---------------------------------------------------------------------------


class GitLabPipeline(GitLabModel):
  id: int
  iid: int | None = None
  project_id: int | None = None
  status: str
  source: str | None = None
  ref: str | None = None
  sha: str | None = None
  before_sha: str | None = None
  tag: bool | None = None
  yaml_errors: str | None = None
  user: GitLabUser | None = None
  created_at: str | None = None
  updated_at: str | None = None
  started_at: str | None = None
  finished_at: str | None = None
  committed_at: str | None = None
  duration: float | None = None
  queued_duration: float | None = None
  coverage: str | None = None
  web_url: str | None = None


class GitLabJobPipeline(GitLabModel):
  id: int
  project_id: int | None = None
  ref: str | None = None
  sha: str | None = None
  status: str | None = None


class GitLabPipelineJob(GitLabModel):
  id: int
  name: str
  status: str
  stage: str | None = None
  ref: str | None = None
  tag: bool | None = None
  allow_failure: bool | None = None
  coverage: float | None = None
  created_at: str | None = None
  started_at: str | None = None
  finished_at: str | None = None
  duration: float | None = None
  queued_duration: float | None = None
  failure_reason: str | None = None
  user: GitLabUser | None = None
  pipeline: GitLabJobPipeline | None = None
  web_url: str | None = None


# ---------------------------------------------------------------------------
# Milestone burndown
# ---------------------------------------------------------------------------


class GitLabBurndownEvent(GitLabModel):
  created_at: str
  weight: int | None = None
  action: str
