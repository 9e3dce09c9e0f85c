"""
API routes for worst-case rolling-window analysis.
"""

from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from worstcase.config import INPUT_EXTENSION, settings
from worstcase.engine.record_source import decode_content
from worstcase.engine.worst_case import analyze_contents, analyze_directory
from worstcase.errors import ConfigurationError, WorstCaseError
from worstcase.models.worst_case import WorstCaseInput, WorstCaseOutput

router = APIRouter(prefix="/api/v1", tags=["worst-case"])


@router.post("/worst-case/analyze", response_model=WorstCaseOutput)
def analyze_data_directory(body: WorstCaseInput):
    """Analyze every input file in a server-side data directory."""
    data_directory = body.data_directory or settings.DATA_DIRECTORY
    if not data_directory:
        raise HTTPException(status_code=400, detail="data_directory is required.")

    try:
        return analyze_directory(
            data_directory,
            ignore_stated_year=body.ignore_stated_year,
            reference_year=body.reference_year,
            max_workers=settings.MAX_WORKERS,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WorstCaseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/worst-case/upload", response_model=WorstCaseOutput)
async def upload_records(
    files: list[UploadFile] = File(...),
    ignore_stated_year: bool = Query(False),
    reference_year: Optional[int] = Query(None, ge=1, le=9999),
):
    """
    Upload one or more hourly CSV files and get the worst-case snapshot.
    """
    contents = []
    for file in files:
        filename = file.filename or ""
        if not filename.lower().endswith(INPUT_EXTENSION):
            raise HTTPException(
                status_code=400,
                detail=f"File must be a {INPUT_EXTENSION} file: {filename!r}",
            )
        try:
            raw = await file.read()
        except Exception as e:
            raise HTTPException(status_code=400, detail=f"Could not read file: {e}")
        try:
            contents.append((filename, decode_content(raw, source=filename)))
        except WorstCaseError as e:
            raise HTTPException(status_code=422, detail=str(e))

    try:
        return analyze_contents(
            contents,
            ignore_stated_year=ignore_stated_year,
            reference_year=reference_year,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WorstCaseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
