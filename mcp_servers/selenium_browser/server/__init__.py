"""MCP protocol layer: tool catalog, registry, handlers, result types and redaction."""
