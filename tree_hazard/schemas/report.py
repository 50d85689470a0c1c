from pydantic import BaseModel, field_validator

from tree_hazard.config.settings import DEFAULT_RISK_LEVEL
from tree_hazard.models.report import Report

class ReportCreate(BaseModel):
    treeId: str = ""
    location: str = ""
    problemType: str = ""
    targetType: str = ""
    description: str = ""
    contact: str = ""
    riskLevel: str = DEFAULT_RISK_LEVEL
    rootHeavePoint: str = ""

    # Campos ausentes o vacíos quedan como cadena vacía
    @field_validator(
        "treeId", "location", "problemType", "targetType",
        "description", "contact", "rootHeavePoint",
        mode="before",
    )
    @classmethod
    def default_empty(cls, value):
        return value or ""

    @field_validator("riskLevel", mode="before")
    @classmethod
    def default_risk_level(cls, value):
        return value or DEFAULT_RISK_LEVEL

class ReportCreatedOut(BaseModel):
    success: bool = True
    report: Report

class RiskAssessmentOut(BaseModel):
    problemType: str
    riskLevel: str
