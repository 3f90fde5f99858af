"""Namespace domain tool handlers."""

from __future__ import annotations

from ..client.gitlab_client import GitLabClient, project_path
from ..helpers import parse, parse_list, query
from ..schemas import inputs as i
from ..schemas.models import GitLabNamespace, GitLabNamespaceExistsResponse


async def list_namespaces(client: GitLabClient, args: i.ListNamespacesInput) -> list[GitLabNamespace]:
  data = await client.get("/namespaces", **query(args))
  return parse_list(GitLabNamespace, data)


async def get_namespace(client: GitLabClient, args: i.GetNamespaceInput) -> GitLabNamespace:
  # namespace ids and full paths encode the same way as project ids
  data = await client.get(f"/namespaces/{project_path(args.namespace_id)}")
  return parse(GitLabNamespace, data)


async def verify_namespace(client: GitLabClient, args: i.VerifyNamespaceInput) -> GitLabNamespaceExistsResponse:
  data = await client.get(f"/namespaces/{project_path(args.path)}/exists", parent_id=args.parent_id)
  return parse(GitLabNamespaceExistsResponse, data)
