"""
MCP Server Wrapping the Task List API (`mcp_server.py`)
"""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP
import requests

# stdout carries the stdio transport
logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

API_URL = os.environ.get("TASK_API_URL", "http://localhost:5000/api").rstrip("/")
TIMEOUT = 10

# Initialize MCP server
mcp = FastMCP("Task List API MCP Server")


@mcp.resource("tasks://list")
def list_tasks() -> list:
    """Fetch all tasks from the task API."""
    response = requests.get(f"{API_URL}/tasks", timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_task(text: str) -> dict:
    """Add a new task via the task API."""
    payload = {"text": text}
    response = requests.post(f"{API_URL}/tasks", json=payload, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def toggle_task(task_id: int) -> dict:
    """Toggle a task between done and not done."""
    response = requests.put(f"{API_URL}/tasks/{task_id}", timeout=TIMEOUT)
    if response.status_code == 404:
        logger.info(f"Task {task_id} not found")
        return response.json()
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_task(task_id: int) -> dict:
    """Delete a task. Deleting an unknown id is not an error."""
    response = requests.delete(f"{API_URL}/tasks/{task_id}", timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


if __name__ == "__main__":
    logger.info(f"Starting MCP server against {API_URL}")
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
