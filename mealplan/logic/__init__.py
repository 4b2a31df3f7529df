"""Core business logic layer.

Subpackages:
- planning: day parsing/resolution and the add/edit/remove workflows
- reporting: Markdown, iCalendar and summary renderings of a plan
"""
__all__ = ["planning", "reporting"]
