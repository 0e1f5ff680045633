"""
Point d'entrée principal de l'API de gestion des élèves et des cours.
Démarrage : uvicorn app.main:app --port 3001
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import check_store_connection, create_record_store
from app.exceptions import error_response
from app.routers import courses, students

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Cycle de vie de l'application : crée le client de la base (échec immédiat si
    la configuration manque) et lance la vérification de connexion en tâche de fond.
    """
    store = create_record_store(settings)
    app.state.store = store

    check_task = None
    if settings.STORE_CHECK_ON_STARTUP:
        check_task = asyncio.create_task(check_store_connection(store))

    yield

    if check_task is not None and not check_task.done():
        check_task.cancel()
        with suppress(asyncio.CancelledError):
            await check_task
    await store.aclose()


app = FastAPI(
    title="Student Records API",
    description="CRUD des élèves et des cours sur une base relationnelle hébergée",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(students.router)
app.include_router(courses.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Seul un corps qui n'est pas du JSON valide est rejeté (400 {"error": ...})."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exceptions non gérées : réponse 500 au même format {"error": message}."""
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return error_response(exc)


@app.get("/health", tags=["Health"])
def health_check():
    """Vérifie que l'API est opérationnelle (ne contacte pas la base)."""
    return {"status": "ok", "service": "Student Records API", "version": "0.1.0"}
