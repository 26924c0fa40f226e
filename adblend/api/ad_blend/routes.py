from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from adblend.api.ad_blend.options import get_options
from adblend.api.ad_blend.schemas import AdBlendOptions, GenerateBlendedImageRequest, GenerateBlendedImageResponse
from adblend.api.ad_blend import service
from adblend.exceptions import ConfigurationError, ImageGenerationError, InvalidDataUriError
from adblend.logger import json_logger as logger

router = APIRouter()


@router.get("/options", response_model=AdBlendOptions, tags=["Ad Blend"])
async def get_options_endpoint():
    """Preset actions, styles and backgrounds for the ad builder form."""
    return get_options()


@router.post(
    "/generate",
    response_model=GenerateBlendedImageResponse,
    response_model_exclude_none=True,
    tags=["Ad Blend"],
)
async def generate_endpoint(request: Request):
    """
    Form submission from the ad builder. Always answers 200 with either
    ``generatedImage`` or ``error`` so the caller renders one error surface.

    Expects multipart fields modelImage, productImage (files) and action,
    style, background, productName. The form is read directly so that a
    mistyped field is reported in ``error`` instead of a validation response.
    """
    form = await request.form()
    logger.info(f"Received generate request for product: {form.get('productName')}")
    result = await service.handle_generate_image(
        model_image=form.get("modelImage"),
        product_image=form.get("productImage"),
        action=form.get("action"),
        style=form.get("style"),
        background=form.get("background"),
        product_name=form.get("productName"),
    )
    if result.error:
        logger.error(f"Image generation failed: {result.error}")
    return result


@router.post(
    "/generate-blended-image",
    response_model=GenerateBlendedImageResponse,
    response_model_exclude_none=True,
    tags=["Ad Blend"],
)
async def generate_blended_image_endpoint(request: GenerateBlendedImageRequest):
    """Generates the blended advertisement from images already encoded as data URIs."""
    logger.info(f"Received generate-blended-image request for product: {request.productName}")
    try:
        return await service.generate_blended_image(request)
    except InvalidDataUriError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except ImageGenerationError as e:
        logger.error(f"Image generation failed: {e.message}")
        return _error_response(status.HTTP_502_BAD_GATEWAY, e.message)
    except ConfigurationError as e:
        return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
    except Exception as e:
        logger.exception(f"Error generating blended image: {e}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to generate image: {e}")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
