# catering/api/v1/endpoints/reports.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, status, Depends, Query

from catering.domain.projections import ReportRange
from catering.schemas.report import ReportResponseSchema
from catering.services.report_service import ReportService
from catering.api.v1.dependencies.auth import require_admin
from catering.api.v1.dependencies.services import get_report_service
from catering.models.user import User
from catering.exceptions.order_exceptions import InvalidReportRangeError

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=ReportResponseSchema)
async def get_report(
        report_range: str = Query(ReportRange.DAILY.value, alias="range", description="daily, monthly or yearly"),
        start: Optional[date] = Query(None, description="First day included"),
        end: Optional[date] = Query(None, description="Last day included"),
        _: User = Depends(require_admin),
        report_service: ReportService = Depends(get_report_service)
) -> ReportResponseSchema:
    """
    Revenue, cost and profit per period.

    Raises:
        HTTPException: 400 if start is after end or the range is unknown
    """
    if start and end and start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start must not be after end"
        )
    try:
        report = await report_service.build_report(report_range, start, end)
        return ReportResponseSchema.from_report(report)
    except InvalidReportRangeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
