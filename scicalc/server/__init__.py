"""Server package for the MCP interface."""
