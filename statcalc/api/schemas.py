from typing import Dict, List, Optional
from pydantic import BaseModel

# Input schema for POST /statistics
class StatisticsIn(BaseModel):
    data: str  # Freeform numbers separated by commas, spaces or newlines

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for the statistics summary
class SummaryOut(BaseModel):
    count: int                      # Number of parsed values
    mean: Optional[float]           # Arithmetic mean
    median: Optional[float]         # Median value
    mode: str                       # Modal values, or "no mode"
    min: float                      # Minimum value
    max: float                      # Maximum value
    range: Optional[float]          # max - min, null if it overflows
    variance: Optional[float]       # Population variance, null if it overflows
    stddev: Optional[float]         # Standard deviation, null if it overflows
    percentiles: Dict[int, float]   # P5..P95
    sorted: List[float]             # Values in ascending order

# Output schema for one histogram bin
class BinOut(BaseModel):
    label: str   # "start-end", one decimal place
    count: int   # Values in the bin
    start: float
    end: float

# Output schema for one pie slice
class SliceOut(BaseModel):
    label: str
    count: int
    percent: float  # Share of all values

# Output schema for POST/GET /statistics
class StatisticsOut(BaseModel):
    summary: SummaryOut
    histogram: List[BinOut]
    proportions: List[SliceOut]
    message: Optional[str] = None  # Notification text for the client

# Output schema for one rendered chart
class ChartOut(BaseModel):
    kind: str
    title: str
    labels: List[str]
    values: List[float]

# Output schema for GET /charts
class ChartsOut(BaseModel):
    bar: Optional[ChartOut] = None
    pie: Optional[ChartOut] = None

# Output schema for DELETE /statistics
class ClearOut(BaseModel):
    status: str   # "cleared" or "empty"
    message: str
