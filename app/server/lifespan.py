import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import add_app_info, configure_logging
from infrastructure.notifications import build_log_payload
from infrastructure.services import get_notifier, get_settings, get_translator

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        settings=settings,
        extra_processors=[add_app_info("api", settings.GIT_SHA)],
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)
    logger.info("application_startup", environment=settings.ENVIRONMENT)
    _list_configs(settings, logger)

    # Fail fast on a missing or malformed locale table
    translator = get_translator()
    app.state.translator = translator
    logger.info("translations_ready", locales=translator.available_locales())

    notifier = get_notifier()
    app.state.notifier = notifier
    notifier.notify_log(
        build_log_payload(
            "application_startup",
            f"ENV {settings.ENVIRONMENT} - VERSION {settings.GIT_SHA}",
        )
    )

    try:
        yield
    finally:
        logger.info("application_shutdown")
        # Pending deliveries drain off the event loop
        await asyncio.to_thread(notifier.shutdown, wait=True)
