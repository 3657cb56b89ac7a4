"""
Public entry point for embedding the review core.

    >>> from shoptet_review.api import analyze
    >>> result = analyze('fetch("https://shop.myshoptet.com/api/orders")')
    >>> [v.rule_id for v in result.violations]
    ['missing-cache-segment']
"""

from typing import Optional

from shoptet_review.domain.analysis import AnalysisResult
from shoptet_review.domain.options import AnalysisOptions
from shoptet_review.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from shoptet_review.use_cases.analyze_source import AnalyzeSourceUseCase


def analyze(source_text: str, options: Optional[AnalysisOptions] = None) -> AnalysisResult:
    """Analyze one script source. Raises InvalidOptions; never raises on parse failure."""
    return AnalyzeSourceUseCase(TreeSitterGateway()).execute(source_text, options)
