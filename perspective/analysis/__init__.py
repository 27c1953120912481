from perspective.analysis.base import BaseRequester
from perspective.analysis.catalog import Model, from_wire_name, to_wire_name
from perspective.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisValidationError,
    InvalidModelError,
)
from perspective.analysis.factory import FilterFactory, RequesterFactory
from perspective.analysis.filter import ThresholdFilter
from perspective.analysis.models import AnalysisResult
from perspective.analysis.requester import Requester

__all__ = [
    "AnalysisError",
    "AnalysisNetworkError",
    "AnalysisResult",
    "AnalysisValidationError",
    "BaseRequester",
    "FilterFactory",
    "InvalidModelError",
    "Model",
    "Requester",
    "RequesterFactory",
    "ThresholdFilter",
    "from_wire_name",
    "to_wire_name",
]
