from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from app.api.errors import FILENAME_REQUIRED
from app.core.config import Settings, get_settings
from app.schemas import UploadUrlRequest
from app.services.storage import StorageService, get_storage_service


async def get_upload_request(request: Request) -> UploadUrlRequest:
    try:
        body = await request.json()
        return UploadUrlRequest.model_validate(body)
    # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit.
    except (ValueError, RecursionError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=FILENAME_REQUIRED,
        ) from None


def get_storage(settings: Settings = Depends(get_settings)) -> StorageService:
    return get_storage_service(settings)
