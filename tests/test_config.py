"""Tests for environment-derived configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gitlab_mcp.config import DEFAULT_API_URL, load_config, normalize_api_url, parse_bool
from gitlab_mcp.errors import ConfigurationError

TOKEN = {"GITLAB_PERSONAL_ACCESS_TOKEN": "glpat-abc"}


class TestLoadConfig:
  def test_missing_token_is_fatal(self):
    with pytest.raises(ConfigurationError, match="GITLAB_PERSONAL_ACCESS_TOKEN"):
      load_config({})

  def test_blank_token_is_fatal(self):
    with pytest.raises(ConfigurationError):
      load_config({"GITLAB_PERSONAL_ACCESS_TOKEN": "   "})

  def test_defaults(self):
    config = load_config(TOKEN)
    assert config.token == "glpat-abc"
    assert config.api_url == DEFAULT_API_URL
    assert config.http_proxy is None
    assert config.https_proxy is None
    assert config.request_timeout == 30.0
    flags = config.flags
    assert not (flags.read_only or flags.wiki_enabled or flags.pipeline_enabled or flags.milestone_enabled)

  def test_flags_from_env(self):
    config = load_config(
      {
        **TOKEN,
        "GITLAB_READ_ONLY_MODE": "true",
        "USE_GITLAB_WIKI": "TRUE",
        "USE_PIPELINE": "1",
        "USE_MILESTONE": " true ",
      }
    )
    assert config.flags.read_only
    assert config.flags.wiki_enabled
    assert not config.flags.pipeline_enabled
    assert config.flags.milestone_enabled

  def test_custom_api_url_is_normalized(self):
    config = load_config({**TOKEN, "GITLAB_API_URL": "https://gitlab.internal/"})
    assert config.api_url == "https://gitlab.internal/api/v4"

  def test_proxies(self):
    config = load_config(
      {**TOKEN, "HTTP_PROXY": "http://proxy:3128", "https_proxy": "https://secure-proxy:3129"}
    )
    assert config.http_proxy == "http://proxy:3128"
    assert config.https_proxy == "https://secure-proxy:3129"

  def test_socks_proxy_accepted(self):
    config = load_config({**TOKEN, "HTTPS_PROXY": "socks5://proxy:1080"})
    assert config.https_proxy == "socks5://proxy:1080"

  def test_unsupported_proxy_scheme_rejected(self):
    with pytest.raises(ConfigurationError, match="ftp"):
      load_config({**TOKEN, "HTTP_PROXY": "ftp://proxy:21"})

  def test_request_timeout(self):
    assert load_config({**TOKEN, "GITLAB_REQUEST_TIMEOUT": "5"}).request_timeout == 5.0

  @pytest.mark.parametrize("value", ["soon", "0", "-3"])
  def test_bad_request_timeout(self, value):
    with pytest.raises(ConfigurationError):
      load_config({**TOKEN, "GITLAB_REQUEST_TIMEOUT": value})

  def test_config_is_frozen(self):
    config = load_config(TOKEN)
    with pytest.raises(ValidationError):
      config.api_url = "https://elsewhere/api/v4"

  def test_token_not_in_repr(self):
    assert "glpat-abc" not in repr(load_config(TOKEN))


@pytest.mark.parametrize(
  "raw, expected",
  [
    (None, DEFAULT_API_URL),
    ("", DEFAULT_API_URL),
    ("https://gitlab.example.com", "https://gitlab.example.com/api/v4"),
    ("https://gitlab.example.com/", "https://gitlab.example.com/api/v4"),
    ("https://gitlab.example.com/api/v4", "https://gitlab.example.com/api/v4"),
    ("https://gitlab.example.com/api/v4/", "https://gitlab.example.com/api/v4"),
  ],
)
def test_normalize_api_url(raw, expected):
  assert normalize_api_url(raw) == expected


def test_parse_bool():
  assert parse_bool("true")
  assert parse_bool("True")
  assert not parse_bool("yes")
  assert not parse_bool(None)
