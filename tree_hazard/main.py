from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import logging.config
import os
import time

from tree_hazard.config.settings import CORS_ORIGINS, LOGGING_CONFIG, PORT, PUBLIC_DIR, UPLOADS_DIR
from tree_hazard.routes import pages, reports

if os.path.exists(LOGGING_CONFIG):
    logging.config.fileConfig(LOGGING_CONFIG, disable_existing_loggers=False)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tree Hazard Report",
    description="API para reportar árboles peligrosos con foto y consultar los reportes recibidos.",
    version="1.0.0"
)

# Middleware para medir el tiempo de las solicitudes
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.debug("Tiempo de procesamiento para %s: %.2f segundos", request.url, process_time)
    response.headers["X-Process-Time"] = str(process_time)
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Los errores se devuelven como {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )

app.include_router(reports.router, prefix="/api", tags=["Reportes"])
app.include_router(pages.router, tags=["Páginas"])

os.makedirs(UPLOADS_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=UPLOADS_DIR), name="uploads")
# Debe ir al final: captura cualquier ruta no definida arriba
app.mount("/", StaticFiles(directory=PUBLIC_DIR, check_dir=False), name="public")

if __name__ == "__main__":
    import uvicorn
    logger.info("Servidor escuchando en http://localhost:%s", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
