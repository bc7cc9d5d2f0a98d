from fastapi import APIRouter

from ..schemas.translate import LanguageOption
from ..services.language_utils import language_options

router = APIRouter(prefix="/api", tags=["languages"])


@router.get("/languages", response_model=list[LanguageOption])
def list_languages():
    return language_options()
