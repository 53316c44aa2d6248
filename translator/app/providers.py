from collections.abc import Mapping
from typing import Protocol

from googletrans import LANGUAGES, Translator

from . import config
from .schemas import TranslationResult

AUTO_DETECT = {"auto": "Automatic"}


class ProviderResponseError(RuntimeError):
    pass


class TranslationProvider(Protocol):
    languages: Mapping[str, str]

    async def translate(self, text: str, target: str) -> TranslationResult: ...


class GoogleTranslateProvider:
    """Google Translate through ``googletrans`` with source auto-detection."""

    languages: Mapping[str, str] = {**AUTO_DETECT, **LANGUAGES}

    def __init__(self, service_urls: list[str] | None = None) -> None:
        self.service_urls = service_urls or config.TRANSLATE_SERVICE_URLS

    async def translate(self, text: str, target: str) -> TranslationResult:
        async with Translator(service_urls=self.service_urls, raise_exception=True) as translator:
            translated = await translator.translate(text, dest=target)

        if not translated.src or translated.text is None:
            raise ProviderResponseError("Translation provider returned an incomplete result.")
        # Google reports region codes as zh-CN while the table keys are lowercase.
        source = translated.src if translated.src in self.languages else translated.src.lower()
        return TranslationResult(detected_source_code=source, translated_text=translated.text)
