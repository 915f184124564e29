# catering/schemas/report.py
from pydantic import BaseModel
from typing import List


class ReportRowSchema(BaseModel):
    """Revenue, cost and profit for one period."""

    model_config = {"from_attributes": True}

    period: str
    orders_count: int
    revenue: float
    cost: float
    profit: float


class ReportTotalsSchema(BaseModel):
    model_config = {"from_attributes": True}

    orders_count: int
    revenue: float
    cost: float
    profit: float


class ReportResponseSchema(BaseModel):
    """Schema for revenue report responses."""

    model_config = {"from_attributes": True}

    range: str
    rows: List[ReportRowSchema]
    totals: ReportTotalsSchema

    @classmethod
    def from_report(cls, report) -> 'ReportResponseSchema':
        return cls(
            range=report.range.value,
            rows=[ReportRowSchema.model_validate(row) for row in report.rows],
            totals=ReportTotalsSchema.model_validate(report.totals)
        )
