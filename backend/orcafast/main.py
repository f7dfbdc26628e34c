"""
Main Entry Point - FastAPI Application
Projeto: OrçaFAST (Orçamentos e Contratos)

Configura a aplicação FastAPI com middleware, routers e ciclo de vida.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orcafast.core.config import settings
from orcafast.core.database import close_db, create_tables, init_db
from orcafast.core.exceptions import AppException

# ------------------------------------------------------------
# Configuração de Logging
# ------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# Lifespan Handler
# ------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ciclo de vida da aplicação.

    - Startup: testa a conexão e cria as tabelas ausentes
    - Shutdown: fecha as conexões do banco
    """
    logger.info("Iniciando %s v%s", settings.app_name, settings.app_version)
    await init_db()
    await create_tables()
    logger.info("Aplicação iniciada com sucesso")

    yield

    logger.info("Encerrando a aplicação...")
    await close_db()
    logger.info("Aplicação encerrada")


# ------------------------------------------------------------
# FastAPI Application
# ------------------------------------------------------------
app = FastAPI(
    title=settings.app_name,
    description="Orçamentos, contratos e cadastro de clientes - Backend API",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# ------------------------------------------------------------
# Middleware CORS
# ------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------------------------------------------
# Exception Handlers
# ------------------------------------------------------------
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handler das exceções de domínio.

    NotFoundError → 404, DuplicateError/ConflictError → 409,
    BusinessValidationError → 422.
    """
    if exc.status_code >= 500:
        logger.error("Erro de aplicação em %s: %s", request.url.path, exc.detail)
    else:
        logger.warning("%s em %s: %s", exc.__class__.__name__, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler genérico para as exceções não tratadas.

    Responde HTTP 500 e registra o traceback.
    """
    logger.error("Exceção não tratada: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Erro interno do servidor"},
    )


# ------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------
@app.get(
    "/health",
    name="Health Check",
    summary="Estado da aplicação",
    tags=["Sistema"],
)
async def health_check() -> dict[str, str]:
    """
    Endpoint de verificação de saúde.

    Returns:
        dict: Estado da aplicação
    """
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
    }


# ------------------------------------------------------------
# Router
# ------------------------------------------------------------
from orcafast.api.v1 import api_v1_router  # noqa: E402

app.include_router(api_v1_router)
