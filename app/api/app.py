from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.documents import router as documents_router
from app.api.health import router as health_router
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import ProcessorError
from app.processor.file_store import FileStore
from app.processor.processor import ExtractionPipeline, build_pipeline


def create_app(settings: Settings, pipeline: ExtractionPipeline | None = None) -> FastAPI:
    """Create the FastAPI application.

    Adapters are selected once here from *settings*; tests may inject a
    ready-made *pipeline* instead.
    """
    app = FastAPI(
        title="Kanthera Document Extraction",
        description="Upload of worker safety documents with OCR and field extraction",
        version="1.0.0",
    )

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    app.state.settings = settings
    app.state.file_store = FileStore(settings.uploads_dir)
    app.state.pipeline = pipeline if pipeline is not None else build_pipeline(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(ProcessorError, _processor_error)

    app.include_router(health_router, prefix="/health", tags=["Health"])
    app.include_router(documents_router, prefix="/api", tags=["Documents"])
    app.mount("/uploads", StaticFiles(directory=settings.uploads_dir), name="uploads")
    return app


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": str(exc.detail)},
    )


async def _processor_error(request: Request, exc: ProcessorError) -> JSONResponse:
    Log.error(f"Upload failed on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "error": str(exc)},
    )
