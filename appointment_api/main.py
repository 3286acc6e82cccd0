import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from appointment_api.core.config import Settings, get_settings, validate_runtime_config
from appointment_api.core.exceptions import DomainException, InvalidInput
from appointment_api.core.logging_config import configure_logging
from appointment_api.database import init_db
from appointment_api.routes import auth_routes, professor_routes, student_routes

logger = logging.getLogger(__name__)


async def handle_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error('%s %s failed: %s', request.method, request.url.path, exc.__class__.__name__)
    return JSONResponse(status_code=exc.status_code, content={'message': exc.message})


# Client messages for fields that fail request validation, keyed by (source, field).
VALIDATION_MESSAGES = {
    ('path', 'professor_id'): 'Professor ID is required',
    ('body', 'timeSlots'): 'Invalid time slots',
    ('body', 'professorId'): 'Professor ID and time slot are required',
    ('body', 'timeSlot'): 'Professor ID and time slot are required',
}


def validation_message(errors: list[dict]) -> str:
    for error in errors:
        loc = tuple(error.get('loc', ()))[:2]
        if loc in VALIDATION_MESSAGES:
            return VALIDATION_MESSAGES[loc]
    return InvalidInput.default_message


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info('Rejected %s %s: %s', request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content={'message': validation_message(exc.errors())},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception('Unhandled error on %s %s', request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Internal server error'},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    validate_runtime_config(settings)

    app = FastAPI(title='College Appointment API')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.add_exception_handler(DomainException, handle_domain_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            init_db(reset=settings.reset_schema_on_startup)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
        else:
            logger.info('Database synced')

    @app.get('/')
    def root():
        return {'status': 'College Appointment API Running'}

    app.include_router(auth_routes.router, prefix='/auth')
    app.include_router(professor_routes.router, prefix='/professors')
    app.include_router(student_routes.router, prefix='/students')

    return app


app = create_app()
