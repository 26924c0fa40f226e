"""
Blended advertisement image generation with Gemini.

- build_prompt - fills the advertisement template with the user's choices.
- generate_blended_image - one Gemini call for a validated request, returns the image as a data URI.
- handle_generate_image - form entry point; validates uploads and always returns the uniform result shape.
"""

import asyncio
from typing import Any, List, Optional, Union

from fastapi import UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile
from google import genai
from google.genai import types

from adblend import config
from adblend.api.ad_blend.encoding import ACCEPTED_IMAGE_TYPES, parse_data_uri, to_data_uri, upload_to_data_uri
from adblend.api.ad_blend.schemas import GenerateBlendedImageRequest, GenerateBlendedImageResponse
from adblend.exceptions import ConfigurationError, ImageGenerationError
from adblend.logger import json_logger as logger

PROMPT_TEMPLATE = (
    "A {style} photograph of a fashionable model {action} the {product_name}. "
    "The scene is a {background}. Professional studio lighting, high quality, photorealistic, "
    "commercial advertisement look. Use the first image as the model's appearance "
    "and the second image as the product."
)

RESPONSE_MODALITIES = ["TEXT", "IMAGE"]

SAFETY_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
)

INVALID_FORM_MESSAGE = "Invalid form data. Please ensure all fields are filled correctly."
NO_IMAGE_MESSAGE = "The AI failed to generate an image. Please try a different prompt."
MIN_PRODUCT_NAME_LENGTH = 3

_client: Optional[genai.Client] = None


def get_client() -> genai.Client:
    """Returns the shared Gemini client, creating it on first use."""
    global _client
    if _client is None:
        if not config.GOOGLE_API_KEY:
            logger.error("GOOGLE_API_KEY or GEMINI_API_KEY environment variable not set")
            raise ConfigurationError("Google API key not configured")
        _client = genai.Client(api_key=config.GOOGLE_API_KEY)
    return _client


def build_prompt(action: str, style: str, background: str, product_name: str) -> str:
    return PROMPT_TEMPLATE.format(
        style=style,
        action=action,
        product_name=product_name,
        background=background,
    )


def build_safety_settings(threshold: Optional[str]) -> Optional[List[types.SafetySetting]]:
    if not threshold:
        return None
    return [types.SafetySetting(category=category, threshold=threshold) for category in SAFETY_CATEGORIES]


def build_generation_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_modalities=RESPONSE_MODALITIES,
        safety_settings=build_safety_settings(config.SAFETY_THRESHOLD),
    )


def build_contents(request: GenerateBlendedImageRequest) -> List[Any]:
    """Prompt text, then the model image, then the product image. The prompt refers to them by position."""
    prompt = build_prompt(request.action, request.style, request.background, request.productName)
    model_mime, model_bytes = parse_data_uri(request.modelImage)
    product_mime, product_bytes = parse_data_uri(request.productImage)
    return [
        prompt,
        types.Part.from_bytes(data=model_bytes, mime_type=model_mime),
        types.Part.from_bytes(data=product_bytes, mime_type=product_mime),
    ]


def extract_image_data_uri(response: Any) -> Optional[str]:
    """Returns the first image part of a Gemini response as a data URI, or None."""
    for candidate in response.candidates or []:
        content = candidate.content
        if content is None:
            continue
        for part in content.parts or []:
            inline_data = part.inline_data
            if inline_data and inline_data.data and (inline_data.mime_type or "").startswith("image/"):
                return to_data_uri(inline_data.data, inline_data.mime_type)
    return None


async def generate_blended_image(
    request: GenerateBlendedImageRequest,
    client: Optional[genai.Client] = None,
) -> GenerateBlendedImageResponse:
    """
    Generates one advertisement image blending the model and the product.

    Exactly one call is made to the image model. Errors raised by the SDK
    (network, quota, safety block) propagate unchanged.

    Raises:
        ImageGenerationError: the response carried no image.
    """
    client = client or get_client()
    contents = build_contents(request)
    logger.info(f"Generating blended image with model={config.IMAGE_MODEL} prompt='{contents[0]}'")

    response = await client.aio.models.generate_content(
        model=config.IMAGE_MODEL,
        contents=contents,
        config=build_generation_config(),
    )

    image_data_uri = extract_image_data_uri(response)
    if not image_data_uri:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        logger.warning(f"No image data found in model response (block_reason={block_reason})")
        raise ImageGenerationError()

    logger.info("Blended image generated successfully.")
    return GenerateBlendedImageResponse(generatedImage=image_data_uri)


def _is_valid_upload(upload: Any) -> bool:
    # Text values posted under a file field arrive as plain strings.
    if not isinstance(upload, StarletteUploadFile) or not upload.filename:
        return False
    if upload.size == 0:
        return False
    return upload.content_type in ACCEPTED_IMAGE_TYPES


def _has_payload(data_uri: str) -> bool:
    return not data_uri.endswith(",")


def _is_valid_text(value: Any, min_length: int = 1) -> bool:
    return isinstance(value, str) and len(value.strip()) >= min_length


async def handle_generate_image(
    model_image: Union[UploadFile, str, None],
    product_image: Union[UploadFile, str, None],
    action: Any,
    style: Any,
    background: Any,
    product_name: Any,
    client: Optional[genai.Client] = None,
) -> GenerateBlendedImageResponse:
    """Validates a form submission and runs the generation. Every failure becomes ``error``."""
    valid = (
        _is_valid_upload(model_image)
        and _is_valid_upload(product_image)
        and _is_valid_text(action)
        and _is_valid_text(style)
        and _is_valid_text(background)
        and _is_valid_text(product_name, MIN_PRODUCT_NAME_LENGTH)
    )
    if not valid:
        logger.warning("Rejected generate request: invalid form data.")
        return GenerateBlendedImageResponse(error=INVALID_FORM_MESSAGE)

    try:
        model_image_uri, product_image_uri = await asyncio.gather(
            upload_to_data_uri(model_image),
            upload_to_data_uri(product_image),
        )
        if not (_has_payload(model_image_uri) and _has_payload(product_image_uri)):
            logger.warning("Rejected generate request: empty image upload.")
            return GenerateBlendedImageResponse(error=INVALID_FORM_MESSAGE)
        request = GenerateBlendedImageRequest(
            modelImage=model_image_uri,
            productImage=product_image_uri,
            action=action,
            style=style,
            background=background,
            productName=product_name,
        )
        result = await generate_blended_image(request, client=client)
    except ImageGenerationError as e:
        return GenerateBlendedImageResponse(error=e.message)
    except Exception as e:
        logger.exception(f"Error during blended image generation: {e}")
        return GenerateBlendedImageResponse(error=f"Failed to generate image: {e}")

    if not result.generatedImage:
        return GenerateBlendedImageResponse(error=NO_IMAGE_MESSAGE)
    return GenerateBlendedImageResponse(generatedImage=result.generatedImage)
