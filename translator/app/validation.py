"""Request validation for the translate route.

Validation never raises for bad input. It returns either ``Accepted`` with a
``TranslationRequest`` or ``Rejected`` carrying the first failing rule's
message, and the router picks the HTTP status from the variant.
"""

from dataclasses import dataclass

from .languages import LanguageRegistry
from .schemas import TranslationRequest

INVALID_TARGET_MESSAGE = "Invalid target language"
TEXT_REQUIRED_MESSAGE = "Text is required"


@dataclass(frozen=True)
class Accepted:
    request: TranslationRequest


@dataclass(frozen=True)
class Rejected:
    reason: str


ValidationResult = Accepted | Rejected


def resolve_text(text: str | None, alias: str | None) -> str:
    return text or alias or ""


def validate_translation_request(target: str, text: str, registry: LanguageRegistry) -> ValidationResult:
    if target not in registry:
        return Rejected(INVALID_TARGET_MESSAGE)
    if len(text) < 1:
        return Rejected(TEXT_REQUIRED_MESSAGE)
    return Accepted(TranslationRequest(target=target, text=text))
