# mylife/core/timestamps.py
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def utc_column(nullable: bool = False) -> Column:
    # a fresh Column per field; sqlalchemy columns cannot be shared between tables
    return Column(DateTime(timezone=True), nullable=nullable)
