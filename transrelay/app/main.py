import logging

import uvicorn
from fastapi import APIRouter, FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .routers import translate

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Transrelay API",
    version="0.1.0",
    description="Translation relay with a stable JSON contract",
)
app.add_exception_handler(StarletteHTTPException, translate.method_not_allowed_handler)

health_router = APIRouter()


@health_router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


# The relay route matches every path, so it must be registered last.
app.include_router(health_router)
app.include_router(translate.router)


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
