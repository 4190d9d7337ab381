import logging
from dataclasses import dataclass
from typing import Optional

from infrastructure.ai.genai_provider import CreativeGenerationError
from use_cases.app_store import AppStore
from use_cases.domain_models import CreativeDraft, CreativeHistoryItem, CreativeKind

log = logging.getLogger(__name__)

TEXT_ERROR = "Ocorreu um erro ao gerar o texto. Por favor, tente novamente."
IMAGE_ERROR = "Ocorreu um erro ao gerar a imagem. Por favor, tente novamente."
API_DISABLED = "A funcionalidade de IA está desativada. A chave de API do Google AI não foi configurada no ambiente."


@dataclass(frozen=True)
class GenerationResult:
    item: Optional[CreativeHistoryItem] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.item is not None


def generate(store: AppStore, provider, kind: CreativeKind, prompt: str) -> GenerationResult:
    """Runs one generation; only successful results reach the history."""
    prompt = prompt.strip()
    if not prompt:
        return GenerationResult(error="Escreva um prompt.")
    if provider is None:
        return GenerationResult(error=API_DISABLED)

    try:
        if kind == CreativeKind.IMAGE:
            result = provider.generate_image(prompt)
        else:
            result = provider.generate_text(prompt)
    except CreativeGenerationError as e:
        log.warning(f"Generation of {kind.value} returned no usable result: {e}")
        return GenerationResult(error=str(e) if kind == CreativeKind.IMAGE else TEXT_ERROR)
    except Exception as e:
        log.error(f"Error generating {kind.value}: {e}", exc_info=True)
        return GenerationResult(error=IMAGE_ERROR if kind == CreativeKind.IMAGE else TEXT_ERROR)

    item = store.add_creative_history_item(CreativeDraft(type=kind, prompt=prompt, result=result))
    log.info(f"Creative {kind.value} #{item.id} generated")
    return GenerationResult(item=item)
