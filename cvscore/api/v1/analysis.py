import json
import logging

from fastapi import APIRouter, File, Form, Request, UploadFile, status

from cvscore.core.config import settings
from cvscore.core.errors import error_response
from cvscore.core.rate_limit import rate_limit
from cvscore.parsing import DocumentExtractionError, extract_text
from cvscore.schemas.analysis import (
    AnalyzeCVRequest,
    AnalyzeCVResponse,
    AnalyzeResumeTextRequest,
    ErrorResponse,
)
from cvscore.scoring import CVTextValidationError
from cvscore.services.analysis_service import run_cv_analysis

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_FAILURE_MESSAGE = "Failed to analyze CV"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _analyze(text: str | None, job_description: str | None, *, source: str, route: str):
    try:
        return run_cv_analysis(text, job_description, source=source)
    except CVTextValidationError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception(json.dumps({"event": "cv_analysis_error", "route": route, "error": str(exc)}))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE_MESSAGE)


@router.post("/cv/analyze", response_model=AnalyzeCVResponse, responses=_ERROR_RESPONSES)
@rate_limit()
async def analyze_cv_text(request: Request, payload: AnalyzeCVRequest):
    _ = request
    return _analyze(payload.text, payload.job_description, source="text", route="analyze")


@router.post("/cv/analyze-resume-text", response_model=AnalyzeCVResponse, responses=_ERROR_RESPONSES)
@rate_limit()
async def analyze_resume_text(request: Request, payload: AnalyzeResumeTextRequest):
    _ = request
    if payload.resume_content is None:
        return error_response(status.HTTP_400_BAD_REQUEST, "Resume content is required")
    return _analyze(payload.resume_content, payload.job_description, source="text", route="analyze-resume-text")


@router.post(
    "/cv/analyze-file",
    response_model=AnalyzeCVResponse,
    responses={**_ERROR_RESPONSES, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
@rate_limit()
async def analyze_cv_file(
    request: Request,
    file: UploadFile = File(...),
    job_description: str | None = Form(default=None, alias="jobDescription"),
):
    _ = request
    filename = file.filename or "uploaded-file"
    max_bytes = settings.max_upload_bytes

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            return error_response(
                413,
                f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)

    try:
        extracted = extract_text(filename=filename, content=b"".join(chunks))
    except DocumentExtractionError as exc:
        return error_response(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, str(exc))

    if not extracted.text.strip():
        return error_response(
            422,
            "No text could be extracted from the uploaded file",
        )
    return _analyze(extracted.text, job_description, source=extracted.source_type, route="analyze-file")
