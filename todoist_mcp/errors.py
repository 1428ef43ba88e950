"""
Errors raised by the dispatch layer.

Remote failures are TodoistAPIError (see todoist_mcp.todoist.client).
"""


class UnknownOperationError(LookupError):
    """A tool, resource or prompt name that is not registered."""
