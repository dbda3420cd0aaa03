"""Mutant Mint — FastAPI Application.

This module is the single entry point for the web service.  It defines the
FastAPI ``app`` instance, the mint route, the error handlers, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
- **Collaborators** (OpenAI client, Pinata client, web3 contract handle and
  signer) are built once in the lifespan and wrapped in a
  :class:`~mutantmint.core.pipeline.MintPipeline` stored on ``app.state``.
- **The route** obtains the pipeline through the :func:`get_pipeline`
  dependency, so tests substitute fakes with ``app.dependency_overrides``.
- **The pipeline is blocking** (requests, web3, the sync OpenAI client) and
  runs in the framework threadpool.
- **Errors** are stage-tagged :class:`~mutantmint.core.errors.MintError`
  subclasses.  Validation errors become 400 responses; every pipeline error
  is logged with its full cause and becomes a masked 500 response that
  keeps the ``stage`` tag.

Endpoints
---------
========  ===========================  ==================================
Method    Path                         Purpose
========  ===========================  ==================================
POST      ``/mint-brainrot-animal``    Generate, pin and mint a creature
GET       ``/health``                  Liveness probe
========  ===========================  ==================================

Usage
-----
CLI (installed entry point)::

    mutantmint

Direct invocation::

    python -m mutantmint.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mutantmint import __version__
from mutantmint.api.models import ErrorResponse, MintRequest, MintResponse
from mutantmint.core.config import MintConfig, config
from mutantmint.core.errors import MintError, PipelineError, ValidationError
from mutantmint.core.pipeline import MISSING_PRIMARY_MESSAGE, MintPipeline
from mutantmint.services import ContractMinter, ImageFetcher, OpenAIGenerator, PinataClient

logger = logging.getLogger(__name__)

MINT_FAILED_MESSAGE = "Error minting brainrot animal NFT"


def build_pipeline(cfg: MintConfig) -> MintPipeline:
    """Construct every collaborator from configuration.

    Raises:
        ValueError: If a required credential or address is missing.
    """
    return MintPipeline(
        generator=OpenAIGenerator.from_config(cfg),
        fetcher=ImageFetcher(),
        pinner=PinataClient.from_config(cfg),
        minter=ContractMinter.from_config(cfg),
        name_prefix=cfg.metadata_name_prefix,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the pipeline on startup and close its sessions on shutdown."""
    app.state.pipeline = build_pipeline(config)
    logger.info("Mint pipeline ready.")

    yield

    app.state.pipeline.close()
    logger.info("Mint pipeline closed on shutdown.")


app = FastAPI(
    title="Mutant Mint",
    description="Generate a mutant creature, pin it to IPFS and mint it as an NFT.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_pipeline(request: Request) -> MintPipeline:
    """Return the process-wide pipeline built in :func:`lifespan`."""
    return request.app.state.pipeline


# ---------------------------------------------------------------------------
# Error handlers.
# ---------------------------------------------------------------------------


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    body = ErrorResponse(error=exc.message)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies as 400, like a missing primary subject."""
    logger.info("Rejected malformed mint request: %s", exc.errors())
    body = ErrorResponse(error=MISSING_PRIMARY_MESSAGE)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


@app.exception_handler(PipelineError)
async def handle_pipeline_error(request: Request, exc: PipelineError) -> JSONResponse:
    """Log the full cause chain and return a masked 500."""
    logger.error("Mint pipeline failed at stage %r: %s", exc.stage, exc.message, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=MINT_FAILED_MESSAGE, stage=exc.stage).model_dump(),
    )


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.post("/mint-brainrot-animal")
async def mint_brainrot_animal(
    req: MintRequest,
    pipeline: MintPipeline = Depends(get_pipeline),
) -> MintResponse:
    """Generate a creature from one or two animals and mint it.

    Args:
        req: Validated :class:`MintRequest` payload.
        pipeline: Injected :class:`MintPipeline`.

    Returns:
        Summary with the description, both ``ipfs://`` addresses and the
        transaction hash.

    Raises:
        ValidationError: (400) The primary subject is missing or blank.
        PipelineError: (500) Any later stage failed.
    """
    try:
        result = await run_in_threadpool(
            pipeline.run, req.primary_subject, req.secondary_subject
        )
    except MintError:
        raise
    except Exception as e:
        raise PipelineError(f"Unexpected failure: {e}") from e

    return MintResponse.from_result(result)


@app.get("/health")
async def health() -> dict:
    """Liveness probe.  Does not contact any collaborator."""
    return {"status": "ok", "version": __version__}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Configure logging and launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~mutantmint.core.config.config`
    (``MUTANTMINT_SERVER_HOST``, ``MUTANTMINT_SERVER_PORT`` and
    ``MUTANTMINT_LOG_LEVEL``).  Defaults to ``0.0.0.0:3000``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "mutantmint.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
