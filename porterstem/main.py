"""
Porter Stem API - FastAPI application for text normalization

Stateless HTTP surface over the Porter stemmer, used by indexing and query
pipelines that need the same term normalization as the search index:
- POST /v1/stem: stem a batch of words
- POST /v1/tokenize: turn free text into stemmed search tokens
- GET /health: liveness probe

Run locally:
    uvicorn porterstem.main:app --port 8080
    porterstem serve --port 8080
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import (
    get_log_file,
    get_log_level,
    get_max_batch_size,
    get_max_word_length,
    get_port,
    load_environment,
)
from .logging_config import setup_logging
from .stemmer import StemmingError, stem
from .tokenizer import tokenize

# Load .env.local / .env before reading any settings
load_environment()

setup_logging(
    log_file=get_log_file(),
    console_level=get_log_level(),
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)

PORT = get_port()
MAX_BATCH_SIZE = get_max_batch_size()
MAX_WORD_LENGTH = get_max_word_length()

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log service start and stop"""
    logger.info(f"Porter Stem API {APP_VERSION} starting (max_batch_size={MAX_BATCH_SIZE}, max_word_length={MAX_WORD_LENGTH})")
    yield
    logger.info("Shutting down...")


# FastAPI app
app = FastAPI(
    title="Porter Stem API",
    description="English word stemming (Porter, 1980) for search indexing",
    version=APP_VERSION,
    lifespan=lifespan,
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class StemRequest(BaseModel):
    words: List[str] = Field(
        ...,
        description="Words to stem (ASCII; any case)",
        min_length=1,
        max_length=MAX_BATCH_SIZE,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"words": ["connections", "relational", "happy"]}
        }
    )

    @field_validator("words")
    @classmethod
    def check_word_lengths(cls, words: List[str]) -> List[str]:
        for word in words:
            if not word:
                raise ValueError("Words must not be empty")
            if len(word) > MAX_WORD_LENGTH:
                raise ValueError(f"Word longer than {MAX_WORD_LENGTH} characters: {word[:32]}...")
        return words


class StemResult(BaseModel):
    word: str
    stem: str


class StemResponse(BaseModel):
    stems: List[StemResult]
    count: int


class TokenizeRequest(BaseModel):
    text: str = Field(..., description="Text to tokenize")
    remove_stopwords: bool = Field(
        default=True,
        description="Drop common English stopwords before stemming"
    )


class TokenizeResponse(BaseModel):
    tokens: List[str]
    count: int


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Porter Stem API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/stem", response_model=StemResponse)
async def stem_words(request: StemRequest):
    """
    Stem a batch of words

    Example:
        POST /v1/stem
        {
            "words": ["Connections", "relational"]
        }

    Response:
        {
            "stems": [
                {"word": "Connections", "stem": "connect"},
                {"word": "relational", "stem": "relat"}
            ],
            "count": 2
        }
    """
    results = []
    for word in request.words:
        try:
            results.append(StemResult(word=word, stem=stem(word)))
        except StemmingError as e:
            logger.warning(f"Rejected stem request: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )

    logger.debug(f"Stemmed {len(results)} words")
    return StemResponse(stems=results, count=len(results))


@app.post("/v1/tokenize", response_model=TokenizeResponse)
async def tokenize_text(request: TokenizeRequest):
    """
    Tokenize text into stemmed search terms

    Example:
        POST /v1/tokenize
        {
            "text": "Connected connections are connecting"
        }
    """
    tokens = tokenize(request.text, remove_stopwords=request.remove_stopwords)
    return TokenizeResponse(tokens=tokens, count=len(tokens))


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "porterstem.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
