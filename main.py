# =============================================================================
# main.py  -  Entry Point for the OpenAlex MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py            serve MCP over stdio (what MCP clients launch)
#   python main.py --smoke    in-process self-check, then exit
#   openalex-mcp [--smoke]    same, once the package is installed
#
# WHAT HAPPENS WHEN SERVING:
#   1. .env is loaded (OPENALEX_DEFAULT_EMAIL, OPENALEX_BEARER_TOKEN, ...)
#   2. Settings are read from the environment, once
#   3. Logging is pointed at STDERR
#   4. The FastMCP server is built from the tool registry and run on stdio
#
# THE SMOKE CHECK:
#   Connects an in-memory MCP client to a freshly built server, lists the
#   tools, and runs one real search_works call (per_page=1).  This talks to
#   the live OpenAlex API, so it needs network access.
# =============================================================================

import asyncio
import json
import sys

from dotenv import load_dotenv

# Load environment variables from .env BEFORE Settings.from_env() runs.
load_dotenv()

from fastmcp import Client

from core.config import Settings
from tools.mcp_server import build_server, configure_logging

SMOKE_ARGUMENTS = {
    "per_page": 1,
    "select": "id,display_name,publication_year,cited_by_count",
}


async def run_smoke_check(settings: Settings) -> int:
    """List the tools and run one search through the full MCP stack.

    Returns:
        A process exit code: 0 on success, 1 on any failure.
    """
    print("=" * 70)
    print("  OPENALEX MCP SERVER - SMOKE CHECK")
    print("=" * 70)

    server = build_server(settings)
    async with Client(server) as client:
        tools = await client.list_tools()
        print(f"\n✅ Found {len(tools)} tools:")
        for tool in tools:
            print(f"   - {tool.name}: {tool.description}")

        print("\n🔧 Calling search_works with per_page=1 ...")
        result = await client.call_tool_mcp("search_works", SMOKE_ARGUMENTS)

    if result.isError:
        print(f"❌ {result.content[0].text}")
        return 1

    data = json.loads(result.content[0].text)
    results = data.get("results") or []
    if not results:
        print("❌ search_works returned no results")
        return 1

    work = results[0]
    print(f"📄 Retrieved: \"{work.get('display_name')}\" ({work.get('publication_year')})")
    print(f"📊 Total works in database: {data.get('meta', {}).get('count', 0):,}")
    print("\n" + "=" * 70)
    return 0


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if "--smoke" in sys.argv[1:]:
        sys.exit(asyncio.run(run_smoke_check(settings)))

    build_server(settings).run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
