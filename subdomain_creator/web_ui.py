"""
FastAPI Web UI for Subdomain Creator

JSON API behind the subdomain creator page.

Endpoints:
- GET  /api/domains/extensions   supported extensions
- POST /api/domains/validate     validation + availability
- GET  /api/domains/suggestions  alternative names
- POST /api/dns/generate         DNS records and forwarding rules
- GET  /health                   liveness probe
"""

import os
import sys
import argparse
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, ConfigDict, Field
import logging

from .config import (
    AppConfig,
    AvailabilityConfig,
    DnsConfig,
    FeatureFlags,
    load_environment,
    setup_logging,
    validate_config
)
from .errors import DomainRequestError
from .models import DnsConfiguration
from .services import DomainService, initialize_domain_service

logger = logging.getLogger(__name__)

# App instance is created after config is validated
app = None


# ============================================================================
# Data Models
# ============================================================================

class ValidateRequest(BaseModel):
    """Domain check request; missing fields are reported as a 400, not a 422"""
    subdomain: Optional[str] = None
    extension: Optional[str] = None


class GenerateRequest(BaseModel):
    """DNS configuration request"""
    model_config = ConfigDict(populate_by_name=True)

    subdomain: Optional[str] = None
    extension: Optional[str] = None
    target_url: Optional[str] = Field(default=None, alias="targetUrl")
    type: Optional[str] = None


class ExtensionsResponse(BaseModel):
    """Supported extensions"""
    extensions: List[str]


class ValidateResponse(BaseModel):
    """Validation errors, or availability when valid"""
    valid: bool
    errors: Optional[List[str]] = None
    available: Optional[bool] = None
    domain: Optional[str] = None
    message: Optional[str] = None


class SuggestionsResponse(BaseModel):
    """Alternative domain names"""
    suggestions: List[str]


class RecordInfo(BaseModel):
    """Single DNS record"""
    type: str
    name: str
    value: str
    ttl: int


class ForwardingInfo(BaseModel):
    """Whole-domain redirect"""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    from_: str = Field(alias="from")
    to: str


class PathForwardingInfo(BaseModel):
    """Path-forward rule"""
    source: str
    destination: str


class DnsConfigResponse(BaseModel):
    """Generated DNS configuration"""
    model_config = ConfigDict(populate_by_name=True)

    domain: str
    records: List[RecordInfo]
    forwarding: Optional[ForwardingInfo] = None
    path_forwarding: Optional[PathForwardingInfo] = Field(default=None, alias="pathForwarding")


class HealthResponse(BaseModel):
    """Liveness probe"""
    status: str
    timestamp: str


# ============================================================================
# Dependencies
# ============================================================================

def get_domain_service(request: Request) -> DomainService:
    """Domain service attached to the running app"""
    return request.app.state.domain_service


def build_dns_config_response(config: DnsConfiguration) -> DnsConfigResponse:
    """
    Build API response from a generated configuration.

    Args:
        config: Generated DNS configuration

    Returns:
        DnsConfigResponse ready for the frontend
    """
    return DnsConfigResponse.model_validate(config.to_dict())


# ============================================================================
# API Endpoints
# ============================================================================

def register_routes(app: FastAPI) -> None:
    """Attach all endpoints to the app"""

    @app.exception_handler(DomainRequestError)
    async def domain_request_error_handler(request: Request, exc: DomainRequestError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/")
    async def read_root():
        """Serve the main HTML page"""
        if not os.path.isfile(AppConfig.INDEX_HTML):
            raise HTTPException(status_code=404, detail="Frontend not installed")
        return FileResponse(AppConfig.INDEX_HTML)

    @app.get("/api/domains/extensions", response_model=ExtensionsResponse)
    async def get_extensions(service: DomainService = Depends(get_domain_service)):
        """Get the supported domain extensions, in display order"""
        return ExtensionsResponse(extensions=service.list_extensions())

    @app.post("/api/domains/validate", response_model=ValidateResponse, response_model_exclude_none=True)
    async def validate_domain(body: ValidateRequest, service: DomainService = Depends(get_domain_service)):
        """
        Validate a subdomain and extension, then check availability.

        Returns:
            {valid: false, errors} or {valid: true, available, domain, message}
        """
        outcome = service.check_domain(body.subdomain, body.extension)

        if not outcome.is_valid:
            return ValidateResponse(valid=False, errors=list(outcome.validation.errors))

        availability = outcome.availability
        return ValidateResponse(
            valid=True,
            available=availability.available,
            domain=availability.domain,
            message=availability.message
        )

    @app.get("/api/domains/suggestions", response_model=SuggestionsResponse)
    async def get_suggestions(
        keyword: Optional[str] = None,
        extension: Optional[str] = None,
        service: DomainService = Depends(get_domain_service)
    ):
        """
        Get alternative domain names.

        Args:
            keyword: Base name for the keyword variants
            extension: Extension appended to every suggestion
        """
        return SuggestionsResponse(suggestions=service.suggest(keyword, extension))

    @app.post("/api/dns/generate", response_model=DnsConfigResponse, response_model_exclude_none=True)
    async def generate_dns_config(body: GenerateRequest, service: DomainService = Depends(get_domain_service)):
        """Generate DNS records and forwarding rules for a domain"""
        config = service.generate_config(body.subdomain, body.extension, body.target_url, body.type)
        return build_dns_config_response(config)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Liveness probe"""
        return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


# ============================================================================
# Initialization
# ============================================================================

def create_app(domain_service: Optional[DomainService] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        domain_service: Service to serve requests with (built from config if None)

    Returns:
        Configured FastAPI app
    """
    global app

    app = FastAPI(
        title=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        version=AppConfig.APP_VERSION,
        debug=FeatureFlags.DEBUG
    )

    app.state.domain_service = domain_service or initialize_domain_service()

    if FeatureFlags.ENABLE_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=AppConfig.CORS_ORIGINS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"]
        )

    if FeatureFlags.SECURITY_HEADERS:
        @app.middleware("http")
        async def add_security_headers(request: Request, call_next):
            response = await call_next(request)
            for name, value in AppConfig.SECURITY_HEADERS.items():
                response.headers.setdefault(name, value)
            return response

    # Mount static files
    if FeatureFlags.SERVE_STATIC and os.path.isdir(AppConfig.STATIC_DIR):
        app.mount("/static", StaticFiles(directory=AppConfig.STATIC_DIR), name="static")

    register_routes(app)

    return app


# ============================================================================
# Main
# ============================================================================

def main():
    """
    Main entry point with CLI argument support.

    Supports:
        --env-file: Path to .env file
        --verbose: Enable debug logging
        --host: Server host (default: 0.0.0.0)
        --port: Server port (default: 3000)
        --reload: Enable auto-reload (development)
    """
    parser = argparse.ArgumentParser(
        description="Subdomain Creator - Web API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with default .env
  python -m subdomain_creator

  # Use custom .env file
  python -m subdomain_creator --env-file /path/to/custom.env

  # Custom host and port
  python -m subdomain_creator --host 127.0.0.1 --port 9000

  # Development mode with auto-reload
  python -m subdomain_creator --reload --verbose
        """
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file (default: .env)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )

    parser.add_argument(
        "--host",
        default=None,
        help=f"Server host (default: {AppConfig.HOST})"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help=f"Server port (default: {AppConfig.PORT})"
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )

    parser.add_argument(
        "--log-file",
        help="Path to log file (optional)"
    )

    args = parser.parse_args()

    if args.env_file:
        load_environment(args.env_file)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        validate_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    host = args.host or AppConfig.HOST
    port = args.port or AppConfig.PORT

    logger.info(f"Starting {AppConfig.APP_NAME} v{AppConfig.APP_VERSION}")
    logger.info(f"Host: {host}:{port}")
    logger.info(f"Platform host: {DnsConfig.PLATFORM_HOST} (TTL {DnsConfig.RECORD_TTL}s)")
    logger.info(f"Availability checker: {AvailabilityConfig.CHECKER_TYPE}")

    import uvicorn
    reload = args.reload or FeatureFlags.RELOAD
    log_level = "debug" if args.verbose else "info"

    if reload:
        # The reloader builds the app in a fresh process
        uvicorn.run(
            "subdomain_creator.web_ui:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level=log_level
        )
    else:
        uvicorn.run(create_app(), host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    main()
