# backend/main.py
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

load_dotenv()

from config import settings
from database import init_db
from utils.logging_config import setup_logging

# Import routerów
from routes.products import router as products_router
from routes.frontend import router as frontend_router

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger("main")

# Inicjalizacja
init_db()

app = FastAPI(title="Product Catalog API", version="1.0.0")

# Uploads - the directory must exist before it is mounted
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    # Cause goes to the log only, never to the client
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Rejestracja routerów
app.include_router(products_router)
app.include_router(frontend_router)

app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Remaining front-end assets (scripts, styles, extra pages); must stay last
app.mount("/", StaticFiles(directory=settings.FRONTEND_DIR, html=True), name="frontend")

logger.info("Catalog ready: uploads=%s frontend=%s", settings.UPLOAD_DIR, settings.FRONTEND_DIR)


def run():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
