from pydantic import BaseModel, Field


class TranslationRequest(BaseModel):
    target: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class TranslationResult(BaseModel):
    detected_source_code: str
    translated_text: str


class IndexResponse(BaseModel):
    message: str
    language: list[str]


class LanguagePair(BaseModel):
    from_: str = Field(..., alias="from")
    to: str

    model_config = {"populate_by_name": True}


class TranslateResponse(BaseModel):
    lang: LanguagePair
    result: str


class ErrorResponse(BaseModel):
    error: str
