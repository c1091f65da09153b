"""
FastAPI entrypoint for the SPPD backend application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sppd.core.config import settings
from sppd.api.router import api_router

app = FastAPI(
    title="SPPD API",
    description="Backend API for travel-order cost derivation and budget reconciliation",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "SPPD API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
