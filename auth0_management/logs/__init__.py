"""Tenant log endpoints."""

from auth0_management.logs.log_get import LogGet
from auth0_management.logs.logs_find import LogsFind

__all__ = ["LogGet", "LogsFind"]
