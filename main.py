from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig, get_logger
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.products.api.router import router as product_router

# Initialize logging configuration
LogConfig.setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = get_logger("lifespan")
    manager = DatabaseManager.get_instance()
    await manager.sql.connect()
    if settings.DB_AUTO_CREATE:
        await manager.sql.create_all()
        logger.info("Database tables created")
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started ({settings.APP_ENV})")
    yield
    await manager.sql.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Register global exception handlers
app.add_exception_handler(BusinessException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(SQLAlchemyError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)

# Mount routers (prefix from config)
app.include_router(
    product_router,
    prefix=settings.API_V1_PRODUCTS_PREFIX,
    tags=["Products"]
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
