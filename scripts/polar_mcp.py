#!/usr/bin/env python3
"""Polars MCP Server — exposes the polar store as tools."""
import json

from fastmcp import FastMCP

import polar_api
from polar_store import PolarStore
from polar_utils.log import polar_log

mcp = FastMCP("polars")

_store: PolarStore | None = None


def bind_store(store: PolarStore) -> None:
    """Set the store every tool operates on."""
    global _store
    _store = store


def _require_store() -> PolarStore:
    if _store is None:
        raise RuntimeError("No polar store bound; call bind_store() first")
    return _store


def _reply(response: polar_api.ApiResponse) -> str:
    return json.dumps(response.to_dict())


def list_polars(archived: bool = False, sort_by: str | None = None, order: str = "asc") -> str:
    """List polars from the active directory, or the archive when archived is true.

    Args:
        archived: List archived polars instead of active ones.
        sort_by: "id" or "_id"; any other value sorts by id. Unsorted when omitted.
        order: "asc" or "desc".

    Returns:
        JSON with "status" and a "body" holding the list of polars.
    """
    polar_log(f"MCP list_polars archived={archived} sort_by={sort_by} order={order}")
    return _reply(polar_api.list_polars(_require_store(), archived, sort_by, order))


def get_polar(polar_id: str) -> str:
    """Fetch one polar by its id (filename), active first then archived."""
    return _reply(polar_api.get_polar(_require_store(), polar_id))


def find_polar(polar_id: int) -> str:
    """Fetch the first polar whose numeric _id matches, preferring active ones."""
    return _reply(polar_api.find_polar(_require_store(), polar_id))


def create_polar(polar: dict) -> str:
    """Create a polar. Without an "id" the last "/" segment of "label" is used.

    Args:
        polar: The polar document with camelCase keys and "_id".
    """
    polar_log(f"MCP create_polar id={polar.get('id')} label={polar.get('label')}")
    return _reply(polar_api.create_polar(_require_store(), polar))


def update_polar(polar_id: str, polar: dict) -> str:
    """Overwrite an active polar. A different "id" in the document renames it."""
    polar_log(f"MCP update_polar {polar_id}")
    return _reply(polar_api.update_polar(_require_store(), polar_id, polar))


def delete_polar(polar_id: str) -> str:
    """Delete a polar, active or archived."""
    polar_log(f"MCP delete_polar {polar_id}")
    return _reply(polar_api.delete_polar(_require_store(), polar_id))


def archive_polar(polar_id: str) -> str:
    """Move an active polar to the archive."""
    polar_log(f"MCP archive_polar {polar_id}")
    return _reply(polar_api.archive_polar(_require_store(), polar_id))


def restore_polar(polar_id: str) -> str:
    """Move an archived polar back to the active directory."""
    polar_log(f"MCP restore_polar {polar_id}")
    return _reply(polar_api.restore_polar(_require_store(), polar_id))


TOOLS = (
    list_polars,
    get_polar,
    find_polar,
    create_polar,
    update_polar,
    delete_polar,
    archive_polar,
    restore_polar,
)

for _tool in TOOLS:
    mcp.tool()(_tool)


def serve(store: PolarStore) -> None:
    bind_store(store)
    polar_log("MCP server starting on stdio")
    mcp.run(transport="stdio")
