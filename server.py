"""Main entry point for the scicalc MCP Server."""

from scicalc.server.mcp_server import main

if __name__ == "__main__":
    main()
