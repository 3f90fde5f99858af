"""Pipeline and job domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, project_path
from ..helpers import parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabPipeline, GitLabPipelineJob


def _project(project_id: str) -> str:
  return f"/projects/{project_path(project_id)}"


async def list_pipelines(client: GitLabClient, args: i.ListPipelinesInput) -> list[GitLabPipeline]:
  data = await client.get(f"{_project(args.project_id)}/pipelines", **query(args, "project_id"))
  return parse_list(GitLabPipeline, data)


async def get_pipeline(client: GitLabClient, args: i.GetPipelineInput) -> GitLabPipeline:
  data = await client.get(f"{_project(args.project_id)}/pipelines/{args.pipeline_id}")
  return parse(GitLabPipeline, data)


async def list_pipeline_jobs(client: GitLabClient, args: i.ListPipelineJobsInput) -> list[GitLabPipelineJob]:
  data = await client.get(
    f"{_project(args.project_id)}/pipelines/{args.pipeline_id}/jobs",
    **query(args, "project_id", "pipeline_id"),
  )
  return parse_list(GitLabPipelineJob, data)


async def get_pipeline_job(client: GitLabClient, args: i.GetPipelineJobInput) -> GitLabPipelineJob:
  data = await client.get(f"{_project(args.project_id)}/jobs/{args.job_id}")
  return parse(GitLabPipelineJob, data)


async def get_pipeline_job_output(client: GitLabClient, args: i.GetPipelineJobOutputInput) -> str:
  return await client.get_text(f"{_project(args.project_id)}/jobs/{args.job_id}/trace")


async def create_pipeline(client: GitLabClient, args: i.CreatePipelineInput) -> GitLabPipeline:
  body = query(args, "project_id")
  data = await client.post(f"{_project(args.project_id)}/pipeline", json=body)
  return parse(GitLabPipeline, data)


async def retry_pipeline(client: GitLabClient, args: i.RetryPipelineInput) -> GitLabPipeline:
  data = await client.post(f"{_project(args.project_id)}/pipelines/{args.pipeline_id}/retry")
  return parse(GitLabPipeline, data)


async def cancel_pipeline(client: GitLabClient, args: i.CancelPipelineInput) -> GitLabPipeline:
  data = await client.post(f"{_project(args.project_id)}/pipelines/{args.pipeline_id}/cancel")
  return parse(GitLabPipeline, data)
