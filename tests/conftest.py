"""Shared fixtures: a client and gateway bound to a recording fake transport."""

from __future__ import annotations

import pytest

from gitlab_mcp.client.gitlab_client import GitLabClient
from gitlab_mcp.config import Config
from gitlab_mcp.gateway import Gateway

from .fakes import FakeTransport, make_config


@pytest.fixture
def config() -> Config:
  return make_config()


@pytest.fixture
def transport() -> FakeTransport:
  return FakeTransport()


@pytest.fixture
def client(config: Config, transport: FakeTransport) -> GitLabClient:
  return GitLabClient(config, transport=transport)


@pytest.fixture
def gateway(client: GitLabClient, config: Config) -> Gateway:
  return Gateway(client, config)
