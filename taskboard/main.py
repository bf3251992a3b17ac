import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard.config import CORS_ORIGINS, LOG_LEVEL
from taskboard.database import create_db_and_tables
from taskboard.routers import auth, tasks, labels, comments, activity, preferences, ai, dashboard

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

create_db_and_tables()

app = FastAPI(
    title="Taskboard API",
    description="Multi-user to-do lists with labels, comments, activity history and AI threads",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(auth.router)
app.include_router(tasks.router)
app.include_router(labels.router)
app.include_router(comments.router)
app.include_router(activity.router)
app.include_router(preferences.router)
app.include_router(ai.router)
app.include_router(dashboard.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}


# Generic error handler to return JSON errors for unexpected exceptions;
# HTTPException subclasses keep FastAPI's own handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
