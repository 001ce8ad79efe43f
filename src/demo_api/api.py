from fastapi import FastAPI, APIRouter, HTTPException
import structlog

from decaesar.errors import DecaesarError
from decaesar.results import DecipherResult
from decaesar.rotation import decode, encode
from decaesar.search import break_cipher

from . import models

log = structlog.get_logger(
    processors=[
        structlog.processors.JSONRenderer(indent=2),
    ],
)

DEMO_PLAINTEXT = "The quick brown fox jumps over the lazy dog"
DEMO_SHIFT = 5

# Create the FastAPI app
app = FastAPI(title="Caesar Cipher Demo API")

# Create the router for API endpoints
router = APIRouter()


def to_candidate(result: DecipherResult) -> models.Candidate:
    return models.Candidate(shift=result.shift, score=result.score)


@router.get("/demo", response_model=models.TextResponse)
def demo():
    """ A fixed sentence encoded with a static key. """
    ciphertext = encode(DEMO_PLAINTEXT, DEMO_SHIFT)
    return models.TextResponse(text=ciphertext.decode("ascii"))


@router.post("/crack", response_model=models.CrackResponse)
def crack(req: models.CrackRequest):
    """ Find the most likely shift of the given ciphertext. """
    try:
        result = break_cipher(req.text)
    except DecaesarError as e:
        log.warning("crack rejected", error=str(e))
        raise HTTPException(status_code=400, detail=f"{e}")

    plaintext = decode(req.text, result.best.shift)
    log.info(
        "cracked",
        text_len=len(req.text),
        best_shift=result.best.shift,
        best_score=result.best.score,
    )
    return models.CrackResponse(
        best=to_candidate(result.best),
        ranked=[to_candidate(r) for r in result.ranked(req.top)],
        plaintext=plaintext.decode("utf-8"),
    )


@router.post("/decode", response_model=models.TextResponse)
def decode_api(req: models.ShiftRequest):
    """ Decode the given text with a known shift. """
    try:
        output = decode(req.text, req.shift)
    except DecaesarError as e:
        log.warning("decode rejected", error=str(e), shift=req.shift)
        raise HTTPException(status_code=400, detail=f"{e}")
    return models.TextResponse(text=output.decode("utf-8"))


@router.post("/encode", response_model=models.TextResponse)
def encode_api(req: models.ShiftRequest):
    """ Encode the given text with a key. """
    try:
        output = encode(req.text, req.shift)
    except DecaesarError as e:
        log.warning("encode rejected", error=str(e), shift=req.shift)
        raise HTTPException(status_code=400, detail=f"{e}")
    return models.TextResponse(text=output.decode("utf-8"))


# Include the router in the app (after all routes are defined)
app.include_router(router, prefix="/api")
