"""
A Flask app exposing the task list API:

    GET    /api/tasks       list tasks
    POST   /api/tasks       create a task from {"text": ...}
    PUT    /api/tasks/<id>  toggle a task's completed flag
    DELETE /api/tasks/<id>  delete a task
"""

import logging
import re

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from task_store import TaskStore

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 5000

# Leading integer as JavaScript's parseInt(value) reads it: ASCII only, 0x means hex
_ID_PATTERN = re.compile(r"\s*(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]*)|(?P<dec>[0-9]+))", re.ASCII)


def parse_task_id(raw):
    """Parse a path id leniently. Returns None when there is no leading integer."""
    match = _ID_PATTERN.match(raw)
    if not match:
        return None
    sign = -1 if match.group("sign") == "-" else 1
    if match.group("dec") is not None:
        return sign * int(match.group("dec"))
    if not match.group("hex"):
        return None
    return sign * int(match.group("hex"), 16)


def create_app(store=None, config=None):
    """Build the API app around `store`, or a freshly seeded one."""
    app = Flask(__name__)
    if config:
        app.config.update(config)
    CORS(app)

    store = store if store is not None else TaskStore()
    app.extensions["task_store"] = store

    @app.route('/api/tasks', methods=['GET'])
    def get_tasks():
        return jsonify(store.list_tasks())

    @app.route('/api/tasks', methods=['POST'])
    def create_task():
        # Malformed bodies are accepted as empty ones
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        new_task = store.create_task(data.get("text"))
        return jsonify(new_task), 201

    @app.route('/api/tasks/<task_id>', methods=['PUT'])
    def toggle_task(task_id):
        task = store.toggle_task(parse_task_id(task_id))
        if task is None:
            return jsonify({"message": "Task not found"}), 404
        return jsonify(task)

    @app.route('/api/tasks/<task_id>', methods=['DELETE'])
    def delete_task(task_id):
        store.delete_task(parse_task_id(task_id))
        return jsonify({"message": "Task deleted"})

    @app.errorhandler(NotFound)
    def not_found(e):
        return jsonify({"message": "Not found"}), 404

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        return jsonify({"message": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.error(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    logger.info(f"Server running on port {PORT}")
    app.run(host=HOST, port=PORT, debug=True)
