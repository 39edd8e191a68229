import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_storage, get_upload_request
from app.api.errors import INTERNAL_SERVER_ERROR
from app.schemas import ErrorResponse, UploadUrlRequest, UploadUrlResponse
from app.services.storage import StorageService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


@router.post(
    "/get-upload-url",
    response_model=UploadUrlResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def issue_upload_url(
    payload: UploadUrlRequest = Depends(get_upload_request),
    storage: StorageService = Depends(get_storage),
) -> UploadUrlResponse:
    try:
        upload_url = storage.create_presigned_put(payload.filename)
    except Exception as exc:
        logger.exception("Error generating pre-signed URL")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_SERVER_ERROR,
        ) from exc
    return UploadUrlResponse(pre_signed_url=upload_url)
