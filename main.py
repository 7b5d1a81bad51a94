import uuid
import logging
from functools import lru_cache
from pathlib import Path
from typing import Union
from fastapi import FastAPI, Request, Depends
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.datastructures import UploadFile

import config
from roster_services import (
    RosterPipeline, S3ObjectStore, RekognitionTextDetector, TeamResolver,
    NhlStatsClient, TEAM_IDS, ValidationError, NotFoundError, UpstreamError,
)

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

FORM_PATH = Path(__file__).parent / "templates" / "form.html"

app = FastAPI(
    title="On-Ice Roster Lookup Service",
    description="Reads team abbreviations from an uploaded image and reports who is on ice",
    version="1.0.0"
)


@lru_cache(maxsize=1)
def get_pipeline() -> RosterPipeline:
    """Build the collaborators once per process."""
    return RosterPipeline(
        store=S3ObjectStore(config.STORAGE_BUCKET, region_name=config.AWS_REGION),
        detector=RekognitionTextDetector(region_name=config.AWS_REGION, timeout=config.HTTP_TIMEOUT),
        resolver=TeamResolver(TEAM_IDS),
        stats=NhlStatsClient(config.STATS_API_BASE_URL, timeout=config.HTTP_TIMEOUT),
    )


def _validate_upload(file: Union[UploadFile, str, None]) -> UploadFile:
    # Browsers send an empty-filename part when no file is chosen
    if not isinstance(file, UploadFile) or not file.filename:
        raise ValidationError("No file uploaded.")
    return file


def _validate_size(data: bytes) -> None:
    if len(data) > config.MAX_UPLOAD_BYTES:
        raise ValidationError("File too large.", status_code=413)


@app.get("/")
async def upload_form():
    """Display a form for uploading files."""
    return FileResponse(FORM_PATH, media_type="text/html")


@app.post("/upload")
async def upload(
    request: Request,
    pipeline: RosterPipeline = Depends(get_pipeline),
):
    """
    Store the uploaded image and report the on-ice players for the first team found in it.

    Args:
        request: Multipart form carrying the image in field `file`

    Returns:
        Boxscore view JSON, {} if no known team appears in the image
    """
    request_id = str(uuid.uuid4())

    try:
        form = await request.form()
        file = _validate_upload(form.get("file"))
        # Never buffer more than one byte past the ceiling
        data = await file.read(config.MAX_UPLOAD_BYTES + 1)
        _validate_size(data)
    except ValidationError as e:
        logger.warning(f"[{request_id}] Rejected upload: {str(e)}")
        return PlainTextResponse(str(e), status_code=e.status_code)

    logger.info(f"[{request_id}] POST /upload - File: {file.filename}, Size: {len(data)} bytes")

    try:
        result = await pipeline.run(file.filename, data, request_id=request_id)
        logger.info(f"[{request_id}] Upload processed. Team found: {bool(result)}")
        return JSONResponse(status_code=200, content=result)

    except NotFoundError as e:
        logger.info(f"[{request_id}] Not found: {str(e)}")
        return JSONResponse(status_code=404, content={"error": str(e)})
    except UpstreamError as e:
        logger.error(f"[{request_id}] Upstream error: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    except Exception as e:
        logger.exception(f"[{request_id}] Unexpected error: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logger.info(f"App listening on port {config.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
