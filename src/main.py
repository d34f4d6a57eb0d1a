"""Conjugador FastAPI application - Portuguese verb conjugation API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from conjugador import settings
from conjugador.auxiliary import AuxiliaryTables
from models import (
    VerbRequest,
    ConjugateRequest,
    VerbResponse,
    ConjugateResponse,
    TensesResponse,
)
from services.conjugation import conjugate_verb, describe_verb, list_tenses

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the auxiliary verb tables on startup."""
    _ = AuxiliaryTables.get_instance()
    logger.info(f"Conjugador {VERSION} ready")
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Conjugador API",
    description="""Portuguese verb conjugation API.

## Features
- **All tenses**: 15 simple and 10 compound tenses, per person
- **Four spellings**: Brazilian and European, before and after the 1990 reform
- **Voices**: active, passive (ser + participle), progressive (estar)
- **Pronouns**: proclisis, mesoclisis and enclisis placed per tense and variant
- **Defective verbs**: missing persons returned as null

## Endpoints
- `/verb` - Normalized infinitive, stems and irregularity flags
- `/conjugate` - Conjugation table for one variant
- `/tenses` - Tense names in build order
""",
    version=VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "conjugador", "version": VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": VERSION}


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/verb", response_model=VerbResponse, tags=["Conjugation"])
async def verb_endpoint(request: VerbRequest) -> VerbResponse:
    """
    Validate an infinitive and describe it.

    Returns its spelling and stem in every variant, the irregular root it
    conjugates like, and its defective family if it has one.
    """
    try:
        return describe_verb(request.infinitive)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Verb lookup failed: {e!s}") from e


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Conjugate a verb for one variant.

    Optionally places one pronoun or an indirect + direct pair, and
    restricts the response to some tenses.
    """
    try:
        return conjugate_verb(
            infinitive=request.infinitive,
            variant=request.variant,
            mood=request.mood,
            pronoun1=request.pronoun1,
            pronoun2=request.pronoun2,
            tenses=request.tenses,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


@app.get("/tenses", response_model=TensesResponse, tags=["Conjugation"])
async def tenses_endpoint() -> TensesResponse:
    """Tense names accepted by /conjugate, in build order."""
    return list_tenses()


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
