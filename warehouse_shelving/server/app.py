"""FastAPI application exposing warehouse shelving services."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from warehouse_shelving.enterprise.config.settings import get_settings
from warehouse_shelving.observability import bind_request_context, configure_logging, configure_tracer
from warehouse_shelving.observability.metrics import REQUEST_COUNTER
from warehouse_shelving.persistence import (
	SqlWarehouseRepository,
	create_schema,
	dispose_engine,
	get_async_session,
	init_engine,
)
from warehouse_shelving.server.api.routers import (
	families_router,
	health_router,
	observability_router,
	warehouses_router,
)
from warehouse_shelving.server.dependencies import get_memory_repository
from warehouse_shelving.services import seed_demo_warehouses

settings = get_settings()
configure_logging(settings.logging)
configure_tracer(settings.telemetry)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
	if settings.database.enabled:
		engine = init_engine(settings)
		if settings.database.create_schema:
			await create_schema(engine)
		if settings.seed.demo_data:
			async with get_async_session() as session:
				await seed_demo_warehouses(SqlWarehouseRepository(session))
	elif settings.seed.demo_data:
		await seed_demo_warehouses(get_memory_repository())
	logger.info("application_started", environment=settings.environment)
	yield
	await dispose_engine()


app = FastAPI(title="Warehouse Shelving API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.api.cors_origins,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

FastAPIInstrumentor.instrument_app(app)


@app.middleware("http")
async def count_requests(request: Request, call_next):
	REQUEST_COUNTER.inc()
	bind_request_context(method=request.method, path=request.url.path)
	response = await call_next(request)
	return response


app.include_router(health_router, prefix="/api/v1")
app.include_router(families_router, prefix="/api/v1")
app.include_router(warehouses_router, prefix="/api/v1")
app.include_router(observability_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
	return {"message": "Warehouse Shelving API"}
