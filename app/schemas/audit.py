from pydantic import BaseModel, field_validator
from typing import Optional


#The Request Contract

class AuditRequest(BaseModel):
    contractCode: str

    @field_validator("contractCode")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("contractCode must not be empty")
        return value  # kept verbatim, the prompt embeds the raw source

class AuditReport(BaseModel):
    aiAudit: Optional[str] = None

class AuditResponse(BaseModel):
    success: bool
    results: Optional[AuditReport] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, report: AuditReport) -> "AuditResponse":
        return cls(success=True, results=report)

    @classmethod
    def fail(cls, message: str) -> "AuditResponse":
        return cls(success=False, error=message)

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)
