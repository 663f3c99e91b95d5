"""Worker document upload endpoint.

Stores the file, runs the extraction pipeline and returns the stored
location together with the extracted, confidence-scored record.
"""

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.api.schemas import ErrorResponse, UploadResponse
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.file_store import FileStore
from app.processor.processor import ExtractionPipeline

router = APIRouter()


@router.post(
    "/workers/{worker_id}/docs",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Upload a worker safety document and extract its fields",
)
def upload_worker_document(
    worker_id: str,
    request: Request,
    file: UploadFile | None = File(None),
) -> UploadResponse:
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="file missing")

    file_store: FileStore = request.app.state.file_store
    pipeline: ExtractionPipeline = request.app.state.pipeline
    settings: Settings = request.app.state.settings

    data = file.file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        Log.warning(
            f"Rejected upload for worker {worker_id}: "
            f"larger than {settings.max_upload_bytes} bytes"
        )
        raise HTTPException(status_code=413, detail="file too large")

    document = file_store.save(
        data,
        original_name=file.filename or "",
        content_type=file.content_type or "",
    )
    Log.info(f"Stored document {document.stored_name} for worker {worker_id}")

    result = pipeline.extract(document)

    relative = f"/uploads/{document.stored_name}"
    return UploadResponse.from_result(
        result,
        file=relative,
        url=_public_url(request, settings, relative),
    )


def _public_url(request: Request, settings: Settings, relative: str) -> str:
    base = settings.public_base_url or str(request.base_url)
    return base.rstrip("/") + relative
