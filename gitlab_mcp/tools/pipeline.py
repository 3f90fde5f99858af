"""
Pipeline tools (8 tools). Listed only when USE_PIPELINE=true.
"""

from __future__ import annotations

from ..schemas import inputs as i
from .descriptor import ToolDescriptor

pipeline_tools: list[ToolDescriptor] = [
  ToolDescriptor(
    name="list_pipelines",
    description="List pipelines in a GitLab project with filtering options",
    input_model=i.ListPipelinesInput,
  ),
  ToolDescriptor(
    name="get_pipeline",
    description="Get details of a specific pipeline in a GitLab project",
    input_model=i.GetPipelineInput,
  ),
  ToolDescriptor(
    name="list_pipeline_jobs",
    description="List all jobs in a specific pipeline",
    input_model=i.ListPipelineJobsInput,
  ),
  ToolDescriptor(
    name="get_pipeline_job",
    description="Get details of a GitLab pipeline job",
    input_model=i.GetPipelineJobInput,
  ),
  ToolDescriptor(
    name="get_pipeline_job_output",
    description="Get the log (trace) output of a GitLab pipeline job",
    input_model=i.GetPipelineJobOutputInput,
    output="text",
  ),
  ToolDescriptor(
    name="create_pipeline",
    description="Create a new pipeline for a branch or tag",
    input_model=i.CreatePipelineInput,
  ),
  ToolDescriptor(
    name="retry_pipeline",
    description="Retry a failed or canceled pipeline",
    input_model=i.RetryPipelineInput,
  ),
  ToolDescriptor(
    name="cancel_pipeline",
    description="Cancel a running pipeline",
    input_model=i.CancelPipelineInput,
  ),
]
