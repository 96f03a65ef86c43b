"""Image upload endpoint.

POST /api/upload (multipart field "image") -> {"imageUrl": "/uploads/<name>"}
"""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from forum.schemas import ErrorResponse, UploadResponse
from forum.services.uploads import save_upload

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_image(
    image: UploadFile | str | None = File(default=None),
) -> UploadResponse | JSONResponse:
    """Store an uploaded image and return its public URL path.

    A plain text "image" field counts as no file.
    """
    if not isinstance(image, StarletteUploadFile) or not image.filename:
        logger.warning("Upload rejected: no file in 'image' field")
        return JSONResponse(status_code=400, content={"message": "Please upload a file."})

    try:
        image_url = await save_upload(image)
    finally:
        await image.close()
    return UploadResponse(image_url=image_url)
