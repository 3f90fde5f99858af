"""
GitLab MCP server.

Exposes the GitLab REST API (v4) as Model Context Protocol tools.
"""

__version__ = "1.0.0"
