"""Pydantic shapes: tool inputs (inputs.py) and GitLab responses (models.py)."""
