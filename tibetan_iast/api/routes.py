import logging
from fastapi import APIRouter, Request, HTTPException
from tibetan_iast.api.schemas import TransliterateRequest, TransliterateResponse
from tibetan_iast.text.engine import TransliterationEngine

router = APIRouter()
log = logging.getLogger("tibetan_iast")


def _check_auth(req: Request):
    settings = req.app.state.settings
    if not settings.require_auth:
        return
    auth = req.headers.get("authorization", "")
    if not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Authorization Bearer token")
    token = auth.split(" ", 1)[1].strip()
    if token != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/v1/transliterate", response_model=TransliterateResponse)
def create_transliteration(payload: TransliterateRequest, request: Request):
    _check_auth(request)

    settings = request.app.state.settings
    if len(payload.input) > settings.max_input_chars:
        raise HTTPException(
            status_code=422,
            detail=f"input is longer than max_input_chars={settings.max_input_chars}",
        )

    # one engine per request: the implicit-vowel flag must never leak between callers
    engine = TransliterationEngine()
    output = "".join(engine.iter_transliterate(payload.input))
    if engine.unknown_codepoints:
        log.info("Transliterated %d chars, unmapped: %s", len(payload.input), ", ".join(engine.unknown_codepoints))

    return TransliterateResponse(output=output, unknown_codepoints=engine.unknown_codepoints)
