"""
Static payloads served at the site root and at /api-docs.
"""

EXAMPLE_TASK = {
    "description": "demo task for lesson 13",
    "startDate": "2024-11-18T18:50:14.314Z",
    "endDate": "2024-11-18T19:47:22.314Z",
    "status": "Done",
}

ENDPOINTS = {
    "GET /api/tasks": "List all tasks",
    "GET /api/tasks/{id}": "Get a task by ID",
    "POST /api/tasks": "Create a new task",
    "PUT /api/tasks/{id}": "Update a task",
    "DELETE /api/tasks/{id}": "Delete a task",
}


def discovery_payload() -> dict:
    return {
        "message": "Tasks CRUD API with MongoDB",
        "documentation": "/api-docs",
        "endpoints": ENDPOINTS,
        "example_post": EXAMPLE_TASK,
    }


# =============================================================================
# OpenAPI document
# =============================================================================

_ID_PARAMETER = {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}

_TASK_PROPERTIES = {
    "description": {"type": "string", "example": EXAMPLE_TASK["description"]},
    "startDate": {"type": "string", "example": EXAMPLE_TASK["startDate"]},
    "endDate": {"type": "string", "example": EXAMPLE_TASK["endDate"]},
    "status": {"type": "string", "example": EXAMPLE_TASK["status"]},
}

OPENAPI_DOC = {
    "openapi": "3.0.0",
    "info": {
        "title": "Tasks CRUD API with MongoDB",
        "version": "1.0.0",
        "description": "Task management backed by MongoDB",
    },
    "paths": {
        "/api/tasks": {
            "get": {
                "summary": "List all tasks",
                "tags": ["Tasks"],
                "responses": {
                    "200": {
                        "description": "Task list",
                        "content": {
                            "application/json": {
                                "example": {
                                    "success": True,
                                    "data": [
                                        {"id": "673b4db631854701e7c3ac66", **EXAMPLE_TASK},
                                    ],
                                    "total": 1,
                                },
                            },
                        },
                    },
                    "500": {"description": "Store error"},
                },
            },
            "post": {
                "summary": "Create a new task",
                "tags": ["Tasks"],
                "requestBody": {
                    "required": True,
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "object",
                                "required": list(_TASK_PROPERTIES),
                                "properties": _TASK_PROPERTIES,
                            },
                        },
                    },
                },
                "responses": {
                    "201": {"description": "Task created"},
                    "400": {"description": "Missing required field"},
                    "500": {"description": "Store error"},
                },
            },
        },
        "/api/tasks/{id}": {
            "get": {
                "summary": "Get a task by ID",
                "tags": ["Tasks"],
                "parameters": [_ID_PARAMETER],
                "responses": {
                    "200": {"description": "Task found"},
                    "400": {"description": "Invalid ID"},
                    "404": {"description": "Task not found"},
                },
            },
            "put": {
                "summary": "Update a task",
                "tags": ["Tasks"],
                "parameters": [_ID_PARAMETER],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "object",
                                "properties": {
                                    name: {"type": "string", "minLength": 1} for name in _TASK_PROPERTIES
                                },
                            },
                        },
                    },
                },
                "responses": {
                    "200": {"description": "Task updated"},
                    "400": {"description": "Invalid ID or empty field"},
                    "404": {"description": "Task not found"},
                },
            },
            "delete": {
                "summary": "Delete a task",
                "tags": ["Tasks"],
                "parameters": [_ID_PARAMETER],
                "responses": {
                    "200": {"description": "Task deleted"},
                    "400": {"description": "Invalid ID"},
                    "404": {"description": "Task not found"},
                },
            },
        },
    },
}
