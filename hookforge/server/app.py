#!/usr/bin/env python3
"""
HOOKFORGE FastAPI Server
Provides REST API for hook contract generation
"""
from typing import Dict, List, Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from hookforge import __version__
from hookforge.core.assembly import compute_hook_permissions, generate
from hookforge.core.config import load_settings
from hookforge.core.errors import HookforgeError
from hookforge.core.options import with_defaults


# ============================================================================
# Request/Response Models
# ============================================================================

class InfoRequest(BaseModel):
    # camelCase keys from the web form are accepted as aliases; unknown
    # keys are kept so option normalization can reject them
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    license: Optional[str] = None
    security_contact: Optional[str] = Field(default=None, alias="securityContact")


class HookOptionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    symbol: Optional[str] = None
    burnable: Optional[bool] = None
    pausable: Optional[bool] = None
    premint: Optional[str] = None
    mintable: Optional[bool] = None
    permit: Optional[bool] = None
    votes: Optional[Union[bool, str]] = None
    flashmint: Optional[bool] = None
    access: Optional[Union[bool, str]] = None
    upgradeable: Optional[Union[bool, str]] = None
    info: Optional[InfoRequest] = None
    whitelist_hook: Optional[bool] = Field(default=None, alias="whitelistHook")
    bumping_fee_hook: Optional[bool] = Field(default=None, alias="bumpingFeeHook")

    def to_options(self) -> dict:
        return self.model_dump(exclude_none=True)


class GenerateResponse(BaseModel):
    success: bool
    contract: Optional[str] = None
    source: Optional[str] = None
    parents: List[str] = []
    functions: List[str] = []
    permissions: Optional[Dict[str, bool]] = None
    error: Optional[str] = None


class PermissionsResponse(BaseModel):
    success: bool
    permissions: Optional[Dict[str, bool]] = None
    error: Optional[str] = None


class DefaultsResponse(BaseModel):
    options: dict


class HealthResponse(BaseModel):
    status: str
    version: str


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="HOOKFORGE API",
    description="Generate Uniswap v4 hook contracts from a few options",
    version=__version__
)

# Enable CORS for the web form
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": __version__
    }


@app.get("/api/defaults", response_model=DefaultsResponse)
async def defaults():
    """Options used when a field is left out"""
    return {"options": with_defaults().to_dict()}


@app.post("/api/generate", response_model=GenerateResponse)
async def generate_hook(request: HookOptionsRequest):
    """
    Generate a hook contract.

    Example:
        POST /api/generate
        {
            "name": "MyHook",
            "bumping_fee_hook": true,
            "whitelist_hook": true
        }
    """
    try:
        result = generate(request.to_options())
    except HookforgeError as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {"success": True, **result.to_dict()}


@app.post("/api/permissions", response_model=PermissionsResponse)
async def permissions(request: HookOptionsRequest):
    """Merged hook permissions for the given options"""
    try:
        record = compute_hook_permissions(with_defaults(request.to_options()))
    except HookforgeError as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {
        "success": True,
        "permissions": record.to_dict()
    }


# ============================================================================
# Run Server
# ============================================================================

def run() -> None:
    import uvicorn

    settings = load_settings()

    print("=" * 60)
    print("HOOKFORGE API Server")
    print("=" * 60)
    print(f"Starting server on http://{settings.host}:{settings.port}")
    print(f"API docs: http://{settings.host}:{settings.port}/docs")
    print("=" * 60)

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
