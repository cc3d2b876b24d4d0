"""MCP stdio server exposing superhero lookup as a tool."""
