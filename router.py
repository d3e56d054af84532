import logging

from fastapi import APIRouter, HTTPException, Request

import config
import commands
import text_processor
from limiter import limiter
from models import (
    ValuePayload, ValueResponse, ProfilePayload, ProfileResponse,
    PrefixPayload, PrefixResponse, ErrorResponse,
)

# --- Router Setup ---

api_router = APIRouter(
    prefix="/api/v1",
    tags=["Obfuscation"],
)

logger = logging.getLogger(__name__)

CODEC_ERRORS = {
    400: {"model": ErrorResponse, "description": "Bad Request: empty input, non-numeric input or invalid token."},
    422: {"description": "Validation Error: The request body is malformed."},
}

# --- Single item ---

@api_router.post("/encrypt", response_model=ValueResponse, summary="Obfuscate one numeric ID", responses=CODEC_ERRORS)
@limiter.limit(config.RATE_LIMIT_SINGLE)
async def encrypt(payload: ValuePayload, request: Request):
    return ValueResponse(result=commands.encrypt(payload.value), profile=commands.get_profile())


@api_router.post("/decrypt", response_model=ValueResponse, summary="Recover one numeric ID", responses=CODEC_ERRORS)
@limiter.limit(config.RATE_LIMIT_SINGLE)
async def decrypt(payload: ValuePayload, request: Request):
    return ValueResponse(result=commands.decrypt(payload.value), profile=commands.get_profile())

# --- Batch ---

@api_router.post("/batch/encrypt", response_model=ValueResponse, summary="Obfuscate a delimited list of IDs", responses=CODEC_ERRORS)
@limiter.limit(config.RATE_LIMIT_BATCH)
async def batch_encrypt(payload: ValuePayload, request: Request):
    return ValueResponse(result=commands.batch_encrypt(payload.value), profile=commands.get_profile())


@api_router.post("/batch/decrypt", response_model=ValueResponse, summary="Recover a delimited list of IDs", responses=CODEC_ERRORS)
@limiter.limit(config.RATE_LIMIT_BATCH)
async def batch_decrypt(payload: ValuePayload, request: Request):
    return ValueResponse(result=commands.batch_decrypt(payload.value), profile=commands.get_profile())

# --- Configuration ---

@api_router.get("/profile", response_model=ProfileResponse, summary="Get the active profile")
async def get_profile():
    return ProfileResponse(name=commands.get_profile(), available=commands.registry.names)


@api_router.put(
    "/profile",
    response_model=ProfileResponse,
    summary="Switch the active profile",
    responses={404: {"model": ErrorResponse, "description": "Not Found: Unknown profile name."}},
)
async def set_profile(payload: ProfilePayload):
    commands.set_profile(payload.name)
    return ProfileResponse(name=commands.get_profile(), available=commands.registry.names)


@api_router.get("/prefix", response_model=PrefixResponse, summary="Get the prefix emission toggle")
async def get_prefix():
    return PrefixResponse(enabled=commands.get_prefix_enabled())


@api_router.put("/prefix", response_model=PrefixResponse, summary="Set the prefix emission toggle")
async def set_prefix(payload: PrefixPayload):
    commands.set_prefix_enabled(payload.enabled)
    return PrefixResponse(enabled=commands.get_prefix_enabled())

# --- Text reformatting ---

@api_router.post("/text/{operation}", response_model=ValueResponse, summary="Reformat an ID list", responses=CODEC_ERRORS)
@limiter.limit(config.RATE_LIMIT_BATCH)
async def reformat_text(operation: str, payload: ValuePayload, request: Request):
    handler = text_processor.OPERATIONS.get(operation)
    if handler is None:
        raise HTTPException(status_code=404, detail=f"Unknown text operation: {operation}")
    return ValueResponse(result=handler(payload.value))
