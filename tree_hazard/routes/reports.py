import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from starlette.concurrency import run_in_threadpool

from tree_hazard.config.database import ReportStore
from tree_hazard.config.settings import MAX_UPLOAD_BYTES
from tree_hazard.dependencies.storage import get_report_store, get_upload_storage
from tree_hazard.models.report import Report
from tree_hazard.risk_assessment import calculate_risk
from tree_hazard.schemas.report import ReportCreate, ReportCreatedOut, RiskAssessmentOut
from tree_hazard.uploads import UploadStorage

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/reports", response_model=List[Report])
def get_reports(store: ReportStore = Depends(get_report_store)):
    reports = store.read_all()
    # Los más recientes primero
    reports.sort(key=lambda report: report.timestamp, reverse=True)
    return reports

@router.post("/report", response_model=ReportCreatedOut)
async def create_report(
    photo: Optional[UploadFile] = File(None),
    tree_id: Optional[str] = Form(None, alias="treeId"),
    location: Optional[str] = Form(None),
    problem_type: Optional[str] = Form(None, alias="problemType"),
    target_type: Optional[str] = Form(None, alias="targetType"),
    description: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    risk_level: Optional[str] = Form(None, alias="riskLevel"),
    root_heave_point: Optional[str] = Form(None, alias="rootHeavePoint"),
    store: ReportStore = Depends(get_report_store),
    uploads: UploadStorage = Depends(get_upload_storage),
):
    try:
        if photo is None or not photo.filename:
            raise HTTPException(status_code=400, detail="請上傳照片")

        content = await photo.read()
        if len(content) > MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail="照片大小不可超過 5MB")

        form = ReportCreate(
            treeId=tree_id,
            location=location,
            problemType=problem_type,
            targetType=target_type,
            description=description,
            contact=contact,
            riskLevel=risk_level,
            rootHeavePoint=root_heave_point,
        )

        reports = await run_in_threadpool(store.read_all)
        timestamp = store.next_timestamp(reports)
        filename = await run_in_threadpool(uploads.save, photo.filename, content, timestamp)

        report = Report(
            id=timestamp,
            imageUrl=uploads.url_for(filename),
            timestamp=timestamp,
            **form.model_dump(),
        )
        reports.append(report)
        try:
            await run_in_threadpool(store.write_all, reports)
        except Exception:
            # No dejar fotos sin reporte
            await run_in_threadpool(uploads.remove, filename)
            raise

        logger.info("Reporte creado con ID %s (%s, %s)", report.id, report.problemType, report.riskLevel)
        return ReportCreatedOut(success=True, report=report)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error al crear el reporte")
        raise HTTPException(status_code=500, detail="伺服器錯誤，請稍後再試")

@router.get("/risk-level", response_model=RiskAssessmentOut)
async def get_risk_level(problem_type: Optional[str] = Query(None, alias="problemType")):
    return RiskAssessmentOut(problemType=problem_type or "", riskLevel=calculate_risk(problem_type))
