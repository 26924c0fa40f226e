from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from adblend.api.ad_blend.encoding import ACCEPTED_IMAGE_TYPES, data_uri_mime_type
from adblend.exceptions import InvalidDataUriError

DATA_URI_DESCRIPTION = (
    "as a data URI that must include a MIME type and use Base64 encoding. "
    "Expected format: 'data:<mimetype>;base64,<encoded_data>'."
)


class GenerateBlendedImageRequest(BaseModel):
    modelImage: str = Field(..., description=f"The image of the model, {DATA_URI_DESCRIPTION}")
    productImage: str = Field(..., description=f"The image of the product, {DATA_URI_DESCRIPTION}")
    action: str = Field(..., min_length=1, description="The action/pose of the model with the product.")
    style: str = Field(..., min_length=1, description="The style of the photograph (e.g., full-body shot, close-up).")
    background: str = Field(..., min_length=1, description="The scene/background/mood of the image.")
    productName: str = Field(..., min_length=1, description="The name/description of the product.")

    @field_validator("action", "style", "background", "productName")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        # Values are substituted into the prompt as given, so only reject blanks.
        if not value.strip():
            raise ValueError("Field must not be blank.")
        return value

    @field_validator("modelImage", "productImage")
    @classmethod
    def check_image_type(cls, value: str) -> str:
        try:
            mime_type = data_uri_mime_type(value)
        except InvalidDataUriError as e:
            raise ValueError(str(e)) from e
        if mime_type not in ACCEPTED_IMAGE_TYPES:
            raise ValueError("Only .jpg, .jpeg, .png and .webp formats are supported.")
        return value


class GenerateBlendedImageResponse(BaseModel):
    generatedImage: Optional[str] = Field(None, description="The AI-generated image as a data URI.")
    error: Optional[str] = None


class OptionItem(BaseModel):
    value: str
    label: str


class AdBlendOptions(BaseModel):
    actions: List[OptionItem]
    styles: List[OptionItem]
    backgrounds: List[OptionItem]
