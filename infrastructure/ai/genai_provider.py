import base64
import logging
from typing import Optional

from google import genai
from google.genai import types

from utils import config

log = logging.getLogger(__name__)

TEXT_MODEL = "gemini-2.5-flash"
IMAGE_MODEL = "gemini-2.5-flash-image"
NO_IMAGE_MESSAGE = "Nenhuma imagem foi retornada pela API. A resposta não continha dados de imagem válidos."


class CreativeGenerationError(RuntimeError):
    """The model answered, but not with what was asked for."""


class GenAiProvider:
    """Text and image generation on Google's Gemini models."""

    def __init__(self, api_key: str, client=None):
        self.client = client or genai.Client(api_key=api_key)

    def generate_text(self, prompt: str) -> str:
        response = self.client.models.generate_content(model=TEXT_MODEL, contents=prompt)
        if not response.text:
            raise CreativeGenerationError("A API não retornou texto.")
        log.debug(f"{TEXT_MODEL} returned {len(response.text)} chars")
        return response.text

    def generate_image(self, prompt: str) -> str:
        """Returns the first generated image as a data URL."""
        response = self.client.models.generate_content(
            model=IMAGE_MODEL,
            contents=prompt,
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )
        for part in _parts(response):
            if part.inline_data and part.inline_data.data:
                encoded = base64.b64encode(part.inline_data.data).decode("ascii")
                return f"data:{part.inline_data.mime_type};base64,{encoded}"

        if response.text:
            raise CreativeGenerationError(f'A API retornou uma mensagem: "{response.text}"')
        raise CreativeGenerationError(NO_IMAGE_MESSAGE)


def _parts(response):
    if not response.candidates:
        return []
    content = response.candidates[0].content
    return (content.parts or []) if content else []


def from_config() -> Optional[GenAiProvider]:
    """None when no API key is configured; AI features are then disabled."""
    api_key = config.genai_api_key()
    if not api_key:
        log.warning("GEMINI_API_KEY not set. AI features will be disabled.")
        return None
    return GenAiProvider(api_key)
