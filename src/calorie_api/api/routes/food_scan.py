"""Food Scan API routes.

Photo in, nutrition estimate out. The estimate is not logged until the
client confirms it through ``POST /log``.
"""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from calorie_api.api.dependencies import RecognitionServiceDep, SettingsDep
from calorie_api.core.exceptions import DecodeError, RecognitionError
from calorie_api.models.errors import PipelineErrorDetail
from calorie_api.models.food import ScanResponse
from calorie_api.services.image_normalizer import normalize_image

router = APIRouter()
logger = logging.getLogger(__name__)

RECOGNITION_FAILED_MESSAGE = "Failed to recognize food. Please try again."


@router.post(
    "",
    response_model=ScanResponse,
    responses={
        400: {"model": PipelineErrorDetail, "description": "File too large"},
        422: {"model": PipelineErrorDetail, "description": "Image could not be decoded"},
        502: {"model": PipelineErrorDetail, "description": "Recognition failed"},
    },
)
async def scan_food(
    settings: SettingsDep,
    service: RecognitionServiceDep,
    file: UploadFile = File(..., description="Photo of the food (any raster format)"),
) -> ScanResponse:
    """
    Estimate the nutrition of a food photo.

    The photo is downsampled to at most 512px on each edge, re-encoded as
    JPEG and sent to the recognition model. Failures are returned as-is;
    nothing is retried.
    """
    content = await file.read()

    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=PipelineErrorDetail(
                error_code="FILE_TOO_LARGE",
                message=f"Image exceeds maximum size of "
                        f"{settings.max_upload_bytes // (1024 * 1024)} MB",
                details={"size": len(content), "max_size": settings.max_upload_bytes},
            ).model_dump(),
        )

    try:
        image = normalize_image(
            content,
            max_edge=settings.image_max_edge,
            quality=settings.image_jpeg_quality,
        )
    except DecodeError as e:
        logger.warning(f"Could not decode upload '{file.filename}': {e.message}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=PipelineErrorDetail.from_error(e).model_dump(),
        ) from e

    try:
        estimate = await service.recognize(image.image_base64)
    except RecognitionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=PipelineErrorDetail.from_error(
                e, message=RECOGNITION_FAILED_MESSAGE
            ).model_dump(),
        ) from e

    return ScanResponse(
        estimate=estimate,
        image_url=image.data_url,
        width=image.width,
        height=image.height,
    )


@router.get("/health")
async def recognition_health(service: RecognitionServiceDep):
    """Report whether the recognition provider is configured."""
    return {
        "provider": service.provider_name,
        "healthy": await service.health_check(),
    }
