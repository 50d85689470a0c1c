from typing import Optional

from tree_hazard.config.settings import DEFAULT_RISK_LEVEL

RISK_UNDETERMINED = DEFAULT_RISK_LEVEL
RISK_LOW = "低風險"
RISK_MEDIUM = "中風險"
RISK_HIGH = "高風險"

RISK_LEVELS = [RISK_UNDETERMINED, RISK_LOW, RISK_MEDIUM, RISK_HIGH]

HIGH_RISK_PROBLEM_TYPES = ["嚴重傾斜", "主幹斷裂或裂縫", "根盤隆起或出土"]
MEDIUM_RISK_PROBLEM_TYPES = ["大枝枯死", "樹冠壓到招牌或電線"]

def calculate_risk(problem_type: Optional[str]) -> str:
    """Clasificación aproximada del riesgo según el tipo de problema."""
    if problem_type in HIGH_RISK_PROBLEM_TYPES:
        return RISK_HIGH
    if problem_type in MEDIUM_RISK_PROBLEM_TYPES:
        return RISK_MEDIUM
    if not problem_type:
        return RISK_UNDETERMINED
    return RISK_LOW
