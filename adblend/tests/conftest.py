import pytest
from unittest.mock import AsyncMock, MagicMock
from google.genai import types

MODEL_JPEG = b"\xff\xd8\xff\xe0model-photo\xff\xd9"
PRODUCT_PNG = b"\x89PNG\r\n\x1a\nproduct-photo"
GENERATED_PNG = b"\x89PNG\r\n\x1a\ngenerated-ad"


def image_response(data: bytes = GENERATED_PNG, mime_type: str = "image/png") -> types.GenerateContentResponse:
    """A Gemini response holding a short text part followed by one image part."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[
                        types.Part(text="Here is your advertisement."),
                        types.Part(inline_data=types.Blob(data=data, mime_type=mime_type)),
                    ],
                )
            )
        ]
    )


def text_only_response() -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text="I cannot create that image.")])
            )
        ]
    )


@pytest.fixture
def mock_genai_client():
    """Mock google-genai client exposing client.aio.models.generate_content."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=image_response())
    return client
