from app.schemas.storage import ErrorResponse, UploadUrlRequest, UploadUrlResponse

__all__ = [
    "UploadUrlRequest",
    "UploadUrlResponse",
    "ErrorResponse",
]
