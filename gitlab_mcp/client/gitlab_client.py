"""
Async HTTP client for the GitLab REST API v4.

The wire layer is a Transport with a single send() method. The default
implementation uses aiohttp with bearer token auth. Nothing here retries:
rate limiting is surfaced to the caller as a RATE_LIMITED BackendError.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import quote, unquote, urlparse

import aiohttp
from aiohttp_socks import ProxyConnectionError, ProxyConnector, ProxyError

from ..config import Config
from ..errors import BackendError, ErrorKind, TransportError

log = logging.getLogger("gitlab_mcp.client")

RATE_LIMIT_MARKER = "User API Key Rate limit exceeded"


# ---------------------------------------------------------------------------
# Wire types
# ---------------------------------------------------------------------------


@dataclass
class HttpRequest:
  method: str
  url: str
  headers: dict[str, str] = field(default_factory=dict)
  params: dict[str, str] = field(default_factory=dict)
  json_body: Any = None


@dataclass
class HttpResponse:
  status: int
  reason: str = ""
  headers: dict[str, str] = field(default_factory=dict)
  body: str = ""

  @property
  def ok(self) -> bool:
    return 200 <= self.status < 300

  def header(self, name: str) -> str | None:
    lowered = name.lower()
    for key, value in self.headers.items():
      if key.lower() == lowered:
        return value
    return None

  def json(self) -> Any:
    if not self.body.strip():
      return None
    return json.loads(self.body)


class Transport(Protocol):
  async def send(self, request: HttpRequest) -> HttpResponse: ...


# ---------------------------------------------------------------------------
# aiohttp transport
# ---------------------------------------------------------------------------


def is_socks_proxy(url: str | None) -> bool:
  return bool(url) and urlparse(url).scheme.startswith("socks")


class AiohttpTransport:
  """Transport backed by lazily created aiohttp sessions.

  HTTP(S) proxies are passed per request. A SOCKS proxy needs its own
  connector, so requests through it use a dedicated session.
  """

  def __init__(
    self,
    timeout: float = 30.0,
    http_proxy: str | None = None,
    https_proxy: str | None = None,
  ) -> None:
    self._timeout = timeout
    self._http_proxy = http_proxy
    self._https_proxy = https_proxy
    # keyed by SOCKS proxy URL, None for the direct / HTTP-proxy session
    self._sessions: dict[str | None, aiohttp.ClientSession] = {}

  @property
  def is_connected(self) -> bool:
    return any(not s.closed for s in self._sessions.values())

  def proxy_for(self, url: str) -> str | None:
    if url.startswith("https:"):
      return self._https_proxy
    return self._http_proxy

  async def _get_session(self, proxy: str | None = None) -> aiohttp.ClientSession:
    key = proxy if is_socks_proxy(proxy) else None
    session = self._sessions.get(key)
    if session is None or session.closed:
      connector = ProxyConnector.from_url(key) if key else None
      session = aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=self._timeout),
      )
      self._sessions[key] = session
    return session

  async def send(self, request: HttpRequest) -> HttpResponse:
    proxy = self.proxy_for(request.url)
    session = await self._get_session(proxy)
    kwargs: dict[str, Any] = {"headers": request.headers}
    if request.params:
      kwargs["params"] = request.params
    if request.json_body is not None:
      kwargs["data"] = json.dumps(request.json_body)
    if proxy and not is_socks_proxy(proxy):
      kwargs["proxy"] = proxy

    try:
      async with session.request(request.method, request.url, **kwargs) as resp:
        body = await resp.text()
        return HttpResponse(
          status=resp.status,
          reason=resp.reason or "",
          headers=dict(resp.headers),
          body=body,
        )
    except (TimeoutError, aiohttp.ClientError, ProxyError, ProxyConnectionError) as e:
      log.error("%s %s failed: %s", request.method, request.url, e)
      raise TransportError(f"Request to GitLab failed: {e}") from e

  async def close(self) -> None:
    for session in self._sessions.values():
      if not session.closed:
        await session.close()
    self._sessions.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def encode_segment(value: str | int) -> str:
  """Percent-encode one URL path segment (slashes included)."""
  return quote(str(value), safe="")


def project_path(project_id: str | int) -> str:
  """Encode a project ID or namespaced path, tolerating pre-encoded input."""
  return encode_segment(unquote(str(project_id)))


def _query_value(value: Any) -> str:
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, (list, tuple)):
    return ",".join(str(v) for v in value)
  return str(value)


def build_params(params: dict[str, Any] | None) -> dict[str, str]:
  """Drop unset values and render the rest as GitLab query strings."""
  if not params:
    return {}
  return {k: _query_value(v) for k, v in params.items() if v is not None}


def raise_for_status(response: HttpResponse) -> None:
  """Map a non-success response to a tagged BackendError."""
  if response.ok:
    return
  body = response.body
  status = response.status

  if status == 403 and RATE_LIMIT_MARKER in body:
    log.error("GitLab API rate limit exceeded: %s", body)
    raise BackendError(
      ErrorKind.RATE_LIMITED,
      status,
      response.reason,
      body,
      message=f"GitLab API Rate Limit Exceeded: {body}. Please try again later.",
    )
  if status == 400:
    raise BackendError(
      ErrorKind.INVALID_REQUEST, status, response.reason, body, message=f"Invalid request: {body}"
    )
  if status == 404:
    raise BackendError(ErrorKind.NOT_FOUND, status, response.reason, body)
  raise BackendError(ErrorKind.GENERIC, status, response.reason, body)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class GitLabClient:
  """GitLab API v4 client bound to one Config and one Transport."""

  def __init__(self, config: Config, transport: Transport | None = None) -> None:
    self._config = config
    self._transport = transport or AiohttpTransport(
      timeout=config.request_timeout,
      http_proxy=config.http_proxy,
      https_proxy=config.https_proxy,
    )
    self._username: str = ""

  @property
  def config(self) -> Config:
    return self._config

  @property
  def api_url(self) -> str:
    return self._config.api_url

  @property
  def username(self) -> str:
    return self._username

  def _headers(self) -> dict[str, str]:
    return {
      "Accept": "application/json",
      "Content-Type": "application/json",
      "Authorization": f"Bearer {self._config.token}",
    }

  async def request(
    self,
    method: str,
    path: str,
    params: dict[str, Any] | None = None,
    json: Any = None,
  ) -> HttpResponse:
    """Send one request. Does not inspect the status."""
    request = HttpRequest(
      method=method,
      url=f"{self.api_url}{path}",
      headers=self._headers(),
      params=build_params(params),
      json_body=json,
    )
    log.debug("%s %s params=%s", method, request.url, request.params)
    return await self._transport.send(request)

  async def _call(
    self,
    method: str,
    path: str,
    params: dict[str, Any] | None = None,
    json: Any = None,
  ) -> Any:
    response = await self.request(method, path, params=params, json=json)
    raise_for_status(response)
    return response.json()

  async def get(self, endpoint: str, /, **params: Any) -> Any:
    return await self._call("GET", endpoint, params=params)

  async def get_response(self, endpoint: str, /, **params: Any) -> HttpResponse:
    """GET and return the checked response, for handlers that read headers."""
    response = await self.request("GET", endpoint, params=params)
    raise_for_status(response)
    return response

  async def get_text(self, endpoint: str, /, **params: Any) -> str:
    response = await self.get_response(endpoint, **params)
    return response.body

  async def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
    return await self._call("POST", path, params=params, json=json)

  async def put(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
    return await self._call("PUT", path, params=params, json=json)

  async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
    return await self._call("DELETE", path, params=params)

  async def check_auth(self) -> bool:
    """Fetch the authenticated user. Used for the startup banner only."""
    try:
      user = await self.get("/user")
    except (BackendError, TransportError) as exc:
      log.warning("Auth check failed: %s", exc)
      return False
    self._username = (user or {}).get("username", "")
    log.info("Authenticated as %s", self._username)
    return True

  async def close(self) -> None:
    close = getattr(self._transport, "close", None)
    if close is not None:
      await close()
