"""
Process configuration, resolved once from the environment at startup.

The resulting Config is frozen and passed explicitly to the client, the
gateway and the MCP server.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError

log = logging.getLogger("gitlab_mcp.config")

DEFAULT_API_URL = "https://gitlab.com/api/v4"
DEFAULT_REQUEST_TIMEOUT = 30.0
PROXY_SCHEMES = ("http", "https", "socks4", "socks5")


class ModeFlags(BaseModel):
  """Boolean switches that shape which tools are listed."""

  model_config = ConfigDict(frozen=True)

  read_only: bool = False
  wiki_enabled: bool = False
  pipeline_enabled: bool = False
  milestone_enabled: bool = False


class Config(BaseModel):
  model_config = ConfigDict(frozen=True)

  token: str = Field(min_length=1, repr=False)
  api_url: str = DEFAULT_API_URL
  flags: ModeFlags = Field(default_factory=ModeFlags)
  http_proxy: str | None = None
  https_proxy: str | None = None
  request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def normalize_api_url(url: str | None) -> str:
  """Return a GitLab API base URL that ends with /api/v4."""
  if not url:
    return DEFAULT_API_URL
  normalized = url[:-1] if url.endswith("/") else url
  if not normalized.endswith("/api/v4"):
    normalized = f"{normalized}/api/v4"
  return normalized


def parse_bool(value: str | None) -> bool:
  return (value or "").strip().lower() == "true"


def _proxy(environ: Mapping[str, str], name: str) -> str | None:
  value = environ.get(name) or environ.get(name.lower())
  if not value:
    return None
  scheme = urlparse(value).scheme
  if scheme not in PROXY_SCHEMES:
    allowed = ", ".join(PROXY_SCHEMES)
    raise ConfigurationError(f"{name} must use one of {allowed}, got scheme '{scheme}'")
  return value


def load_config(environ: Mapping[str, str] | None = None) -> Config:
  """Build the process Config. Raises ConfigurationError if unusable."""
  env = os.environ if environ is None else environ

  token = (env.get("GITLAB_PERSONAL_ACCESS_TOKEN") or "").strip()
  if not token:
    raise ConfigurationError("GITLAB_PERSONAL_ACCESS_TOKEN environment variable is not set")

  raw_timeout = env.get("GITLAB_REQUEST_TIMEOUT")
  timeout = DEFAULT_REQUEST_TIMEOUT
  if raw_timeout:
    try:
      timeout = float(raw_timeout)
    except ValueError:
      raise ConfigurationError(f"GITLAB_REQUEST_TIMEOUT must be a number, got '{raw_timeout}'")
    if timeout <= 0:
      raise ConfigurationError("GITLAB_REQUEST_TIMEOUT must be positive")

  flags = ModeFlags(
    read_only=parse_bool(env.get("GITLAB_READ_ONLY_MODE")),
    wiki_enabled=parse_bool(env.get("USE_GITLAB_WIKI")),
    pipeline_enabled=parse_bool(env.get("USE_PIPELINE")),
    milestone_enabled=parse_bool(env.get("USE_MILESTONE")),
  )

  config = Config(
    token=token,
    api_url=normalize_api_url(env.get("GITLAB_API_URL")),
    flags=flags,
    http_proxy=_proxy(env, "HTTP_PROXY"),
    https_proxy=_proxy(env, "HTTPS_PROXY"),
    request_timeout=timeout,
  )
  log.debug("Loaded config: api_url=%s flags=%s", config.api_url, flags)
  return config
