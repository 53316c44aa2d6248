from .logging_config import logger
from .providers import TranslationProvider
from .schemas import TranslationResult


class TranslationGateway:
    def __init__(self, provider: TranslationProvider) -> None:
        self.provider = provider

    async def translate(self, text: str, target: str) -> TranslationResult:
        logger.debug("Translating %d characters to %s", len(text), target)
        result = await self.provider.translate(text, target)
        logger.info("Translated to %s (detected source: %s)", target, result.detected_source_code)
        return result
