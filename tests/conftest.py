"""Shared fixtures: a small pet store document exercising refs, security and
multiple content types, plus option sets used across the test modules.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from opgen.options import Options

_PETSTORE: dict[str, Any] = {
    "openapi": "3.0.3",
    "info": {"title": "Pet Store", "version": "1.2.0"},
    "security": [{"api_key": []}],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "tags": ["pets"],
                "summary": "List all pets",
                "parameters": [
                    {"$ref": "#/components/parameters/limit"},
                    {"name": "session", "in": "cookie", "schema": {"type": "string"}},
                ],
                "responses": {
                    "200": {
                        "description": "A list of pets",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "array",
                                    "items": {"$ref": "#/components/schemas/Pet"},
                                },
                            },
                        },
                    },
                    "default": {"$ref": "#/components/responses/Error"},
                },
            },
            "post": {
                "operationId": "createPet",
                "tags": ["pets"],
                "security": [{"petstore_auth": ["write:pets"]}, {"api_key": []}],
                "requestBody": {"$ref": "#/components/requestBodies/NewPet"},
                "responses": {
                    "201": {
                        "description": "Created",
                        "content": {
                            "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                            "application/xml": {"schema": {"$ref": "#/components/schemas/Pet"}},
                        },
                    },
                },
            },
        },
        "/pets/{petId}": {
            "parameters": [
                {"name": "petId", "in": "path", "required": True, "schema": {"type": "integer"}},
            ],
            "get": {
                "operationId": "showPetById",
                "tags": ["pets"],
                "security": [],
                "responses": {
                    "200": {
                        "description": "A pet",
                        "content": {
                            "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                        },
                    },
                },
            },
            "delete": {
                "tags": ["pets"],
                "deprecated": True,
                "parameters": [
                    {"name": "X-Request-Id", "in": "header", "schema": {"type": "string"}},
                ],
                "responses": {"204": {"description": "Deleted"}},
            },
        },
        "/pets/{petId}/photos/{photoId}": {
            "put": {
                "operationId": "uploadPhoto",
                "parameters": [
                    {"name": "petId", "in": "path", "required": True, "schema": {"type": "integer"}},
                ],
                "requestBody": {
                    "required": True,
                    "content": {
                        "image/png": {"schema": {"type": "string", "format": "binary"}},
                        "application/octet-stream": {"schema": {"type": "string", "format": "binary"}},
                    },
                },
                "responses": {
                    "404": {"description": "No such pet"},
                    "default": {
                        "description": "Upload result",
                        "content": {"text/plain": {"schema": {"type": "string"}}},
                    },
                },
            },
        },
    },
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                    "tag": {"type": "string"},
                },
            },
            "Error": {
                "type": "object",
                "properties": {"code": {"type": "integer"}, "message": {"type": "string"}},
            },
        },
        "parameters": {
            "limit": {
                "name": "limit",
                "in": "query",
                "description": "How many items to return at one time",
                "schema": {"type": "integer"},
            },
        },
        "requestBodies": {
            "NewPet": {
                "required": True,
                "content": {
                    "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                },
            },
        },
        "responses": {
            "Error": {
                "description": "Unexpected error",
                "content": {
                    "application/json": {"schema": {"$ref": "#/components/schemas/Error"}},
                },
            },
        },
        "securitySchemes": {
            "api_key": {"type": "apiKey", "name": "X-Api-Key", "in": "header"},
            "petstore_auth": {
                "type": "oauth2",
                "flows": {
                    "implicit": {
                        "authorizationUrl": "https://example.com/oauth",
                        "scopes": {"write:pets": "modify pets"},
                    },
                },
            },
        },
    },
}


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A fresh copy of the pet store document."""
    return copy.deepcopy(_PETSTORE)


@pytest.fixture
def options() -> Options:
    return Options()


@pytest.fixture
def silent_options() -> Options:
    return Options(silent=True)
