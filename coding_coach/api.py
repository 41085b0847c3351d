import logging
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

import coding_coach.config as config
from coding_coach.constants import LANGUAGE_MAP
from coding_coach.errors import CoachError, InvalidRequestError
from coding_coach.gateway import GeminiGateway
from coding_coach.prompts import build_prompt
from coding_coach.retry import RetryPolicy
from coding_coach.validation import check_request

STATIC_DIR = Path(__file__).parent / "static"


@lru_cache
def get_settings():
    return config.Settings()

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)

# Initialize Limiter
limiter = Limiter(key_func=get_remote_address)

app = FastAPI(
    title="Coding Coach API",
    description="Scores an uploaded source file and suggests improvements using Gemini.",
    version="1.0.0",
)

# Register Limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CoachError)
async def coach_error_handler(request: Request, exc: CoachError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def get_gateway() -> GeminiGateway:
    settings = get_settings()
    return GeminiGateway(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        retry_policy=RetryPolicy(
            max_retries=settings.MAX_RETRIES,
            base_delay=settings.RETRY_BASE_DELAY_SECONDS,
        ),
    )


@app.get("/", tags=["UI"], include_in_schema=False)
async def index():
    return FileResponse(path=STATIC_DIR / "index.html", media_type="text/html")


@app.get("/languages", tags=["Analysis"])
async def get_languages():
    return LANGUAGE_MAP


@app.post("/analyze", tags=["Analysis"])
@limiter.limit(settings.RATE_LIMIT)
async def analyze(request: Request, gateway: GeminiGateway = Depends(get_gateway)):
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Request body is not valid JSON") from e

    decision = check_request(body, get_settings().MAX_CONTENT_LENGTH)
    if not decision.accepted:
        logging.warning(f"Rejected analysis request: {decision.reason}")
        raise InvalidRequestError(decision.reason)

    analysis_request = decision.request
    prompt = build_prompt(analysis_request.filename, analysis_request.content)
    logging.info(
        f"Analyzing {analysis_request.filename!r} "
        f"(language={prompt.language or 'unknown'}, {len(analysis_request.content)} chars)"
    )

    try:
        result = await gateway.analyze(prompt.text)
    except CoachError as e:
        logging.error(f"Analysis of {analysis_request.filename!r} failed: {e.message} {e.details or ''}")
        raise

    logging.info(f"Analysis of {analysis_request.filename!r} scored {result.score}/100")
    return JSONResponse(content=result.to_wire())
