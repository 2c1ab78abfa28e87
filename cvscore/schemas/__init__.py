from .analysis import (
    AnalyzeCVRequest,
    AnalyzeCVResponse,
    AnalyzeResumeTextRequest,
    ErrorResponse,
    JobMatchResponse,
)

__all__ = [
    "AnalyzeCVRequest",
    "AnalyzeResumeTextRequest",
    "AnalyzeCVResponse",
    "JobMatchResponse",
    "ErrorResponse",
]
