# src/api/__init__.py
from .errors import (
    DecodeError as DecodeError,
    FieldTypeMismatch as FieldTypeMismatch,
    InsightError as InsightError,
    MalformedPayload as MalformedPayload,
    MissingKeyList as MissingKeyList,
    TransportError as TransportError,
)
from .insight import fetch_insight_payload as fetch_insight_payload, fetch_mars_weather as fetch_mars_weather
from .insight_decode import (
    InsightReport as InsightReport,
    Measurement as Measurement,
    SolData as SolData,
    decode_insight_report as decode_insight_report,
)
