import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

from bridgeindex.api.admin import router as admin_router
from bridgeindex.api.chains import router as chains_router
from bridgeindex.api.providers import router as providers_router
from bridgeindex.container import Container

logger = logging.getLogger("bridgeindex.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container
    yield
    await container.http_client().close()
    await container.engine().dispose()


app = FastAPI(title="Bridge Index", version="0.1.0", lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(admin_router)
app.include_router(providers_router)
app.include_router(chains_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
