# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the translation layer between MCP and core/.
#
#   registry.py    the tool catalog as data (names, descriptions, schemas)
#   dispatcher.py  name -> core handler, and the uniform result envelope
#   mcp_server.py  FastMCP wiring: one MCP tool per registry entry
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or headers (core/client.py, core/credentials.py)
#   - They do NOT reshape OpenAlex payloads (core/shaping.py)
#
# Tool descriptions matter: the LLM on the other side reads them to decide
# which tool to call and how to fill in its arguments.
# =============================================================================
