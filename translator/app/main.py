from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .languages import LanguageRegistry
from .logging_config import configure_logging, logger
from .providers import GoogleTranslateProvider
from .routers import translate
from .services import TranslationGateway


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(config.LOG_LEVEL)
    provider = GoogleTranslateProvider()
    app.state.registry = LanguageRegistry(provider.languages)
    app.state.gateway = TranslationGateway(provider)
    logger.info("Loaded %d languages from %s", len(app.state.registry), type(provider).__name__)
    yield


app = FastAPI(
    title="Translator API",
    version="0.1.0",
    description="Translate free text into any supported language",
    lifespan=lifespan,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Request %s %s failed", request.method, request.url.path, exc_info=exc)
    return translate.error_response(translate.UNKNOWN_ERROR, 500)


app.include_router(translate.router)


def run() -> None:
    configure_logging(config.LOG_LEVEL)
    logger.info("Server running at http://%s:%d/", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
