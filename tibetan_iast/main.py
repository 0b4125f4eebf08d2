import logging
from fastapi import FastAPI
from tibetan_iast.logs import setup_logging
from tibetan_iast.settings import Settings
from tibetan_iast.api.routes import router as transliterate_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    setup_logging(settings.log_level)
    logging.getLogger("tibetan_iast").info("Starting app...")
    if settings.require_auth:
        logging.getLogger("tibetan_iast").info("Bearer auth enabled")

    app = FastAPI(title="Tibetan to IAST transliteration", version="0.1.0")
    app.state.settings = settings

    app.include_router(transliterate_router)
    return app


app = create_app()
