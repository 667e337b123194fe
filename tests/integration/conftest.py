"""Stand-in data API and data compiler API served in-process."""

from typing import Any

import httpx
import pytest
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from datadock.services import DataApiClient, DataCompilerClient

TABLES: dict[str, dict[str, Any]] = {
    "customers": {
        "columns": ["id", "name", "country"],
        "rows": [[1, "Alice", "DE"], [2, "Bob", None], [3, "Chloé", "FR"]],
    },
    "order items": {
        "columns": ["order_id", "sku", "quantity"],
        "rows": [[10, "A-1", 2]],
    },
    "archive": {"columns": [], "rows": []},
}


def create_services_app() -> FastAPI:
    """Build one app exposing both services' routes."""
    app = FastAPI(title="datadock test services")

    @app.get("/db_tables")
    async def list_tables() -> dict[str, list[str]]:
        return {"database_tables": list(TABLES)}

    @app.get("/data/{table_name}")
    async def table_data(table_name: str) -> dict[str, Any]:
        if table_name not in TABLES:
            raise HTTPException(status_code=404, detail=f"Table {table_name} not found")
        return TABLES[table_name]

    @app.post("/compile")
    async def compile_schema(body: dict[str, Any]) -> JSONResponse:
        document = body.get("json_data")
        if isinstance(document, dict) and document.get("name") and document.get("columns"):
            return JSONResponse(
                {"status": "success", "message": f"Compiled table {document['name']}"}
            )
        return JSONResponse({"status": "error"}, status_code=400)

    return app


@pytest.fixture
def services_transport() -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_services_app())


@pytest.fixture
def data_client(services_transport) -> DataApiClient:
    return DataApiClient("http://data.test", transport=services_transport)


@pytest.fixture
def compiler_client(services_transport) -> DataCompilerClient:
    return DataCompilerClient("http://compiler.test", transport=services_transport)
