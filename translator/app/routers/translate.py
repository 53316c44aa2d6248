from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ..dependencies import get_gateway, get_registry
from ..languages import LanguageRegistry
from ..schemas import ErrorResponse, IndexResponse, LanguagePair, TranslateResponse
from ..services import TranslationGateway
from ..validation import Rejected, resolve_text, validate_translation_request

GREETING = "Unleash the power of Translator API"
UNKNOWN_ERROR = "unknown error"

router = APIRouter(tags=["translate"])


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("/", response_model=IndexResponse)
def index(registry: LanguageRegistry = Depends(get_registry)) -> IndexResponse:
    return IndexResponse(message=GREETING, language=registry.supported_targets())


@router.get(
    "/{target}",
    response_model=TranslateResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate(
    target: str,
    text: str | None = Query(default=None),
    t: str | None = Query(default=None),
    registry: LanguageRegistry = Depends(get_registry),
    gateway: TranslationGateway = Depends(get_gateway),
) -> TranslateResponse | JSONResponse:
    outcome = validate_translation_request(target, resolve_text(text, t), registry)
    if isinstance(outcome, Rejected):
        return error_response(outcome.reason.lower(), status.HTTP_400_BAD_REQUEST)

    request = outcome.request
    result = await gateway.translate(request.text, request.target)
    lang = LanguagePair(
        from_=registry.lowercase_name(result.detected_source_code),
        to=registry.lowercase_name(request.target),
    )
    return TranslateResponse(lang=lang, result=result.translated_text)
