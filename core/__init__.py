# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the OpenAlex adapter logic: query encoding,
# header resolution, the HTTP request, result shaping and the static
# filterable-field tables.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  Every handler
#   here is a plain function (arguments, settings) -> JSON payload that can
#   be called from a REPL or a test without a server running.
#
# The MCP protocol, the tool catalog and the error envelope belong to
# tools/.
# =============================================================================
