from uuid import UUID
from pydantic import BaseModel
from typing import List


class LintIssueOut(BaseModel):
    code: str
    message: str
    refs: List[str] = []

    class Config:
        from_attributes = True


class LintReportOut(BaseModel):
    quiz_id: UUID
    ok: bool
    issues: List[LintIssueOut]
