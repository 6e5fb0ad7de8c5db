"""Tasklist - task list API.

Users own lists, lists own tasks. Authentication uses short-lived signed
access tokens and long-lived refresh-token sessions.
"""

__version__ = "0.1.0"

from tasklist.infrastructure.api.app import app

__all__ = ["app", "__version__"]
