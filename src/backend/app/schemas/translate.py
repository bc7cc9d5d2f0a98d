from pydantic import BaseModel, ConfigDict, Field


class TranslationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | None = None
    image: str | None = None
    target_lang: str | None = Field(default=None, alias="targetLang")


class TranslationResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str


class LanguageOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    label: str
    speech_locale: str = Field(alias="speechLocale")
