from fastapi import APIRouter, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.http import responses
from infrastructure.i18n import request_locale
from infrastructure.services import ResponseSinkDep, TranslatorDep

router = APIRouter(prefix="/translations", tags=["Translations"])
limiter = get_limiter()


@router.get("")
@limiter.limit("30/minute")
def get_translations(request: Request, sink: ResponseSinkDep, translator: TranslatorDep):
    """Return the messages for the locale selected by ``?lang=``.

    Keys the locale does not define are filled from the default locale.
    """
    locale = request_locale(request)
    return responses.success_with_data(
        sink,
        {
            "locale": locale,
            "available_locales": translator.available_locales(),
            "messages": translator.catalog(locale),
        },
    )


@router.get("/{key}")
@limiter.limit("30/minute")
def get_translation(
    key: str, request: Request, sink: ResponseSinkDep, translator: TranslatorDep
):
    """Return a single message, 404 when even the default locale lacks it.

    ``fallback`` is true when the message came from the default locale.
    """
    locale = request_locale(request)
    message = translator.translate(key, locale)
    if message is None:
        return responses.not_found(sink, request, translator)
    return responses.success_with_data_list(
        sink,
        {
            "key": key,
            "message": message,
            "fallback": not translator.has_message(key, locale),
        },
    )
