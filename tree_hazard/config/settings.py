# tree_hazard/config/settings.py
import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Puerto del servidor HTTP
PORT = int(os.getenv("PORT", 3000))

# Archivo JSON con todos los reportes (arreglo de objetos)
REPORTS_FILE = os.getenv("REPORTS_FILE", os.path.join(BASE_DIR, "reports.json"))

# Carpeta donde se guardan las fotos subidas
UPLOADS_DIR = os.getenv("UPLOADS_DIR", os.path.join(BASE_DIR, "uploads"))
UPLOADS_URL_PREFIX = "/uploads"

# Archivos estáticos del cliente (HTML/CSS/JS)
PUBLIC_DIR = os.getenv("PUBLIC_DIR", os.path.join(BASE_DIR, "public"))

LOGGING_CONFIG = os.getenv("LOGGING_CONFIG", os.path.join(BASE_DIR, "logging_config.ini"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Límite de tamaño de la foto (5MB)
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

DEFAULT_RISK_LEVEL = "未判定"
