import json
import logging
import os
import time
from typing import List

from pydantic import ValidationError

from tree_hazard.config.settings import REPORTS_FILE
from tree_hazard.models.report import Report

logger = logging.getLogger(__name__)


class ReportStore:
    """Colección de reportes guardada como un arreglo JSON en un solo archivo.

    Cada escritura reescribe el archivo completo (leer-modificar-escribir) sin
    bloqueo: dos envíos simultáneos pueden pisarse y gana el último.
    """

    def __init__(self, path: str):
        self.path = path

    def read_all(self) -> List[Report]:
        if not os.path.exists(self.path):
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write("[]")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.loads(f.read())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("No se pudo parsear %s, se usa una colección vacía: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("%s no contiene un arreglo JSON, se usa una colección vacía", self.path)
            return []

        reports = []
        for item in data:
            try:
                reports.append(Report.model_validate(item))
            except ValidationError as e:
                logger.warning("Reporte inválido ignorado en %s: %s", self.path, e)
        return reports

    def write_all(self, reports: List[Report]) -> None:
        data = [report.model_dump() for report in reports]
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))

    def next_timestamp(self, reports: List[Report]) -> int:
        # El id es el timestamp; si el reloj no avanzó se toma el siguiente entero
        timestamp = int(time.time() * 1000)
        if reports:
            timestamp = max(timestamp, max(report.id for report in reports) + 1)
        return timestamp


reports_store = ReportStore(REPORTS_FILE)
