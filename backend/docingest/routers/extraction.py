"""
extraction.py
- Purpose: API routes that run the extraction pipeline on raw document text.
- Design: Keep router thin. analyze() never raises, so a pipeline failure
  still comes back as a 200 with extraction_method == "failed".
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile

from docingest.api.deps import get_orchestrator
from docingest.core.config import settings
from docingest.core.request_context import set_context
from docingest.extraction.orchestrator import ExtractionOrchestrator
from docingest.extraction.types import ProcessingOptions
from docingest.schemas.extraction import AnalyzeRequest, ExtractionResponse
from docingest.validations.upload_validators import read_upload_text, validate_text_upload

router = APIRouter(prefix="/api/extraction", tags=["Extraction"])


@router.post("/analyze", response_model=ExtractionResponse)
def analyze_content(
    body: AnalyzeRequest,
    orchestrator: ExtractionOrchestrator = Depends(get_orchestrator),
):
    if body.document_id:
        set_context(document_id=body.document_id)
    result = orchestrator.analyze(body.content, body.options.to_options())
    return ExtractionResponse.from_result(result)


@router.post("/analyze-file", response_model=ExtractionResponse)
def analyze_file(
    file: UploadFile = File(...),
    enable_ocr: bool = Form(False),
    max_pages: int = Form(50, ge=1),
    quality_threshold: float = Form(0.3, ge=0.0, le=1.0),
    enable_image_analysis: bool = Form(False),
    document_id: str | None = Form(None),
    orchestrator: ExtractionOrchestrator = Depends(get_orchestrator),
):
    validate_text_upload(file)
    content = read_upload_text(file, max_bytes=settings.EXTRACTION_MAX_UPLOAD_BYTES)

    set_context(document_id=document_id or file.filename)
    options = ProcessingOptions(
        enable_ocr=enable_ocr,
        max_pages=max_pages,
        quality_threshold=quality_threshold,
        enable_image_analysis=enable_image_analysis,
    )
    result = orchestrator.analyze(content, options)
    return ExtractionResponse.from_result(result)
