from fastapi import Request

from .languages import LanguageRegistry
from .services import TranslationGateway


def get_registry(request: Request) -> LanguageRegistry:
    return request.app.state.registry


def get_gateway(request: Request) -> TranslationGateway:
    return request.app.state.gateway
