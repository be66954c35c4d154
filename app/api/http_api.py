"""HTTP API for the scenario prompt service.

Routes:
- POST /api/generate: multipart (or JSON) transcript + rubric + attachments,
  answered with {"ok": true, "output": ...}.
- GET /: landing page from the static directory.
- GET /healthz: provider, model and template status.

Errors are rendered as {"ok": false, "error": ...}: validation failures as
400, configuration/upstream/unexpected failures as 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.schemas import ErrorResponse, GenerateResponse, HealthResponse
from app.api.uploads import read_generation_request, summarize
from app.config.settings import Settings
from app.generation.exceptions import GenerationError, ValidationError
from app.generation.service import GenerationService, build_generation_service
from app.logging.logger import Log


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


def create_app(settings: Settings, service: GenerationService | None = None) -> FastAPI:
    """Build the FastAPI application around a generation service."""
    if service is None:
        service = build_generation_service(settings)

    app = FastAPI(title="Scenario Prompt Service")
    app.state.settings = settings
    app.state.service = service

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        Log.warning(f"400 {request.url.path}: {exc}")
        return _error(400, str(exc))

    @app.exception_handler(GenerationError)
    async def handle_generation_error(request: Request, exc: GenerationError) -> JSONResponse:
        Log.error(f"500 {request.url.path}: {exc}")
        return _error(500, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"500 {request.url.path}: {exc}")
        return _error(500, str(exc) or "Unknown error")

    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate(request: Request) -> GenerateResponse:
        generation_request = await read_generation_request(
            request,
            max_files=settings.max_total_files,
            max_file_size_bytes=settings.max_file_size_bytes,
        )
        Log.info(f"POST /api/generate {summarize(generation_request)}")
        output = await run_in_threadpool(service.generate, generation_request)
        return GenerateResponse(output=output)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(
            status="ok",
            provider=settings.completion_provider,
            model=service.model,
            template_loaded=service.template_store.loaded,
        )

    @app.get("/", response_model=None)
    async def index() -> FileResponse | JSONResponse:
        page = settings.static_dir / "index.html"
        if not page.is_file():
            return _error(404, "Not Found")
        return FileResponse(page)

    return app
