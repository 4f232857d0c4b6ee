"""OpenAPI schema customization for the parking API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from hexaparking.models.errors import ProblemDetail

PROBLEM_DETAIL_REF = {"$ref": "#/components/schemas/ProblemDetail"}

DESCRIPTION = """
# Hexa Parking API

Parking lot management: lots with a fixed number of spaces, cars that park
and leave, and a registry of known cars.

## Rules

- A car can be parked in at most one lot at a time
- A lot never holds more cars than its total spaces
- A lot with parked cars cannot be deleted
- Plates follow the Korean format, e.g. `123가1234` or `서울 123 가 1234`

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807).
Domain rule violations carry a `kind` field naming the rule:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.8",
  "title": "Conflict",
  "status": 409,
  "detail": "Parking lot Main is full",
  "instance": "/api/parking-lots/Main/park",
  "kind": "LotFull"
}
```
"""


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=DESCRIPTION,
        routes=app.routes,
    )

    openapi_schema["tags"] = [
        {"name": "Health", "description": "Health check endpoint for monitoring"},
        {"name": "parking-lots", "description": "Parking lots, parking and leaving"},
        {"name": "cars", "description": "Car registration"},
        {
            "name": "integrated-parking",
            "description": "Car registration and parking in a single call",
        },
    ]

    components = openapi_schema.setdefault("components", {})
    schemas = components.setdefault("schemas", {})
    problem_schema = ProblemDetail.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    for name, definition in problem_schema.pop("$defs", {}).items():
        schemas.setdefault(name, definition)
    schemas.setdefault("ProblemDetail", problem_schema)

    # Every endpoint may answer with a ProblemDetail
    for path in openapi_schema["paths"].values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                for status_code, description in (
                    ("422", "Validation Error"),
                    ("500", "Internal Server Error"),
                ):
                    operation["responses"][status_code] = {
                        "description": description,
                        "content": {"application/json": {"schema": PROBLEM_DETAIL_REF}},
                    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
