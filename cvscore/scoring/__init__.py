from .aggregate import Rating, RegionalRelevance
from .constants import FeedbackCaps, ScoringConstants, load_scoring_constants
from .engine import AnalysisResult, analyze_cv, score_dimensions
from .features import FeatureFlags, build_feature_flags
from .job_match import JobMatch, JobRelevance
from .normalize import CVTextValidationError, NormalizedText, normalize_text, validate_cv_text

__all__ = [
    "AnalysisResult",
    "analyze_cv",
    "score_dimensions",
    "Rating",
    "RegionalRelevance",
    "FeedbackCaps",
    "ScoringConstants",
    "load_scoring_constants",
    "FeatureFlags",
    "build_feature_flags",
    "JobMatch",
    "JobRelevance",
    "CVTextValidationError",
    "NormalizedText",
    "normalize_text",
    "validate_cv_text",
]
