from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UploadUrlRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    filename: StrictStr = Field(..., min_length=1)


class UploadUrlResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pre_signed_url: str = Field(..., alias="preSignedUrl")


class ErrorResponse(BaseModel):
    error: str
