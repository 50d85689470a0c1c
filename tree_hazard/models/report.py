from pydantic import BaseModel

from tree_hazard.config.settings import DEFAULT_RISK_LEVEL

class Report(BaseModel):
    id: int  # Igual al timestamp de creación
    imageUrl: str  # "/uploads/<timestamp>-<random>.<ext>"
    treeId: str = ""
    location: str = ""
    problemType: str = ""
    targetType: str = ""
    description: str = ""
    contact: str = ""
    riskLevel: str = DEFAULT_RISK_LEVEL  # "未判定", "低風險", "中風險", "高風險"
    rootHeavePoint: str = ""
    timestamp: int  # Milisegundos desde epoch
