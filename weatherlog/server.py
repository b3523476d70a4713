"""History API: FastAPI app exposing append and list over the SQLite store."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from weatherlog.config.schema import AppConfig
from weatherlog.errors import StoreError, ValidationError
from weatherlog.history.service import MISSING_DATA_MESSAGE, HistoryService

logger = logging.getLogger(__name__)

Scalar = str | int | float | None


class SavePayload(BaseModel):
    """Append body. Values arrive stringified but numbers are tolerated."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    humidity: Scalar = None
    location: Scalar = None
    temperature: Scalar = None
    wind_speed: Scalar = Field(default=None, alias="windSpeed")

    def as_payload(self) -> dict:
        return self.model_dump(by_alias=True)


def create_app(config: AppConfig | None = None, service: HistoryService | None = None) -> FastAPI:
    config = config or AppConfig()
    service = service or HistoryService(
        config.history.db_path, max_limit=config.history.max_limit
    )

    app = FastAPI(title="Weather History API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.state.history = service

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError):
        return JSONResponse(
            {"success": False, "message": MISSING_DATA_MESSAGE}, status_code=400
        )

    # ── History endpoints ───────────────────────────────────────

    @app.post("/save_weather")
    def save_weather(payload: SavePayload):
        """Append one lookup and echo it back with the new id."""
        data = payload.as_payload()
        try:
            record = service.append(data)
        except ValidationError as e:
            logger.info("Rejected append: %s", e)
            return JSONResponse({"success": False, "message": str(e)}, status_code=400)
        except StoreError as e:
            logger.error("Append failed: %s", e.message)
            return JSONResponse({"success": False, "message": e.message}, status_code=500)
        return {
            "success": True,
            "message": "Data saved successfully!",
            "id": record.id,
            "data": data,
        }

    @app.get("/get_weather_history")
    def get_weather_history():
        """Last ten lookups, newest first."""
        try:
            records = service.list_recent(config.history.max_limit)
        except StoreError as e:
            logger.error("History listing failed: %s", e.message)
            return JSONResponse({"success": False, "message": e.message}, status_code=500)
        return {
            "success": True,
            "count": len(records),
            "data": [r.to_dict() for r in records],
        }

    @app.api_route("/save_weather", methods=["GET", "PUT", "PATCH", "DELETE"])
    def save_weather_wrong_method():
        return JSONResponse(
            {"success": False, "message": "Only POST method is allowed"}, status_code=405
        )

    @app.api_route("/get_weather_history", methods=["POST", "PUT", "PATCH", "DELETE"])
    def get_weather_history_wrong_method():
        return JSONResponse(
            {"success": False, "message": "Only GET method is allowed"}, status_code=405
        )

    # Browsers send Origin + Access-Control-Request-Method, which the CORS
    # middleware answers; a bare OPTIONS still gets an empty 200.
    @app.options("/save_weather")
    @app.options("/get_weather_history")
    def preflight():
        return Response(status_code=200)

    @app.get("/health")
    def get_health():
        return {"db_ok": service.ping()}

    return app


if __name__ == "__main__":
    import uvicorn

    from weatherlog.config.loader import load_config

    cfg = load_config("ops/configs/default.yaml")
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port)
