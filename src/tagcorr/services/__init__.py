"""Service layer for tagcorr.

Example usage:

    from tagcorr.services import AnalysisService

    service = AnalysisService.from_config(config)
    averages = service.aggregate(TagSelection.parse("music,gaming"))
"""

from .analysis import AnalysisService

__all__ = ["AnalysisService"]
