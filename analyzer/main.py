"""
MAIN APPLICATION - FastAPI app initialization and configuration

This is the entry point for the Scenario Analyzer service.
It sets up:
1. FastAPI app with metadata and documentation
2. CORS and request logging middleware
3. Route registration for the analysis endpoint
4. Health check endpoint
"""

import os
import time
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from analyzer.config import CORS_ORIGINS
from analyzer.routes import analyze
from analyzer.utils import get_logger

logger = get_logger(__name__)

# STEP 1: Create FastAPI application with metadata
app = FastAPI(
    title="Scenario Analyzer",
    version="0.1.0",
    docs_url="/swagger",     # Interactive Swagger UI for API exploration
    redoc_url="/docs",       # Cleaner ReDoc documentation
)

# STEP 2: Add middleware for the frontend and logging
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,  # the React app runs on localhost:3000 by default
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    logger.info(f"[{request_id}] {request.method} {request.url}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"[{request_id}] {response.status_code} - {process_time:.3f}s")

    return response


# STEP 3: Health check
@app.get("/health")
def health():
    """
    Simple health check endpoint.

    Returns: {"status": "ok"} if the service is running
    """
    return {"status": "ok"}


# STEP 4: Register API routes
app.include_router(analyze.router, prefix="/api", tags=["analyze"])


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
