from __future__ import annotations

from pydantic import BaseModel


class AmountResponse(BaseModel):
    hundredths: int
    display: str
    whole: int
    fractional: int
