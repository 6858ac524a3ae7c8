"""FastMCP server implementation for relschema-mcp."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import dotenv
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger
from starlette.requests import Request
from starlette.responses import JSONResponse

from relschema_mcp.execute.mcp_tools import register_schema_tools
from relschema_mcp.services.schema_service_manager import SchemaServiceManager

# Load environment variables
dotenv.load_dotenv()

_logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_mcp_instance: FastMCP) -> AsyncGenerator[None]:
    """Dispose of the database engine on shutdown."""
    manager = SchemaServiceManager.get_instance()
    try:
        yield
    finally:
        _logger.info("Shutting down SchemaService during lifespan shutdown")
        manager.shutdown()


mcp = FastMCP(
    instructions=(
        "Reflects MySQL tables into a typed schema model and renders CREATE TABLE, "
        "DROP TABLE, SELECT * and INSERT statements for them."
    ),
    lifespan=lifespan,
)

register_schema_tools(mcp)


@mcp.custom_route("/health", methods=["GET"])
async def health_check(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "healthy", "service": "mcp-server"})
