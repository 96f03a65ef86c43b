"""Image upload storage.

Saves uploaded files under the public uploads directory, which is served
as static files, and returns the URL path to store as a post's imageUrl.

Filenames: {epoch_ms}-{8 hex chars}{original extension}, e.g.
"1760000000000-3f9a1c2e.png". The random part keeps repeated uploads
within the same millisecond from overwriting each other.
"""

import logging
from pathlib import Path
import time
from uuid import uuid4

from fastapi import UploadFile

from forum.services.errors import StorageError, UploadTooLargeError
from forum.settings import Settings, get_settings

logger = logging.getLogger("uvicorn.error")

CHUNK_SIZE = 64 * 1024


def ensure_upload_dir(settings: Settings | None = None) -> Path:
    """Ensure upload directory exists."""
    settings = settings or get_settings()
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    return settings.upload_dir


def generate_upload_name(original_filename: str) -> str:
    """Build a collision-resistant filename keeping the original extension."""
    ext = Path(original_filename).suffix
    return f"{int(time.time() * 1000)}-{uuid4().hex[:8]}{ext}"


async def save_upload(upload: UploadFile, settings: Settings | None = None) -> str:
    """Persist an uploaded file and return its public URL path.

    Args:
        upload: The multipart file.
        settings: Settings override (defaults to cached settings).

    Returns:
        URL path such as "/uploads/1760000000000-3f9a1c2e.png".

    Raises:
        UploadTooLargeError: If the file exceeds max_upload_bytes.
        StorageError: If writing to disk fails.
    """
    settings = settings or get_settings()
    upload_dir = ensure_upload_dir(settings)
    filename = generate_upload_name(upload.filename or "")
    filepath = upload_dir / filename

    written = 0
    try:
        with open(filepath, "wb") as f:
            while chunk := await upload.read(CHUNK_SIZE):
                written += len(chunk)
                if written > settings.max_upload_bytes:
                    raise UploadTooLargeError(settings.max_upload_bytes)
                f.write(chunk)
    except UploadTooLargeError:
        filepath.unlink(missing_ok=True)
        logger.warning(f"Rejected upload {upload.filename!r}: over {settings.max_upload_bytes} bytes")
        raise
    except OSError as e:
        filepath.unlink(missing_ok=True)
        logger.exception(f"Failed to save upload {upload.filename!r}")
        raise StorageError("Failed to save upload") from e

    logger.info(f"Saved upload {upload.filename!r} to {filepath} ({written} bytes)")
    return f"/{settings.uploads_subdir}/{filename}"
