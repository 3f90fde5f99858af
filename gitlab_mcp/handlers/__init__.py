"""Handler dispatch table: maps tool names to handler coroutines."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from . import issue, label, merge_request, milestone, namespace, pipeline, project, repository, wiki

Handler = Callable[..., Awaitable[Any]]

# Every public coroutine defined in a handler module is a tool handler
DISPATCH: dict[str, Handler] = {}

for mod in (repository, merge_request, issue, namespace, project, label, wiki, pipeline, milestone):
  for name, fn in vars(mod).items():
    if name.startswith("_") or not inspect.iscoroutinefunction(fn):
      continue
    if fn.__module__ != mod.__name__:
      continue
    DISPATCH[name] = fn
