from typing import Dict

from pydantic import BaseModel, Field


class TaskTotals(BaseModel):
    todo: int
    in_progress: int = Field(serialization_alias="inProgress")
    completed: int
    total: int


class DashboardSummary(BaseModel):
    tasks: TaskTotals
    labels: int


class RecordSummary(BaseModel):
    per_table: Dict[str, int] = Field(serialization_alias="perTable")
    total_records: int = Field(serialization_alias="totalRecords")
