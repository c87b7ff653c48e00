"""
Image-based product analysis.

Placeholder contract: OCR of product photos is not implemented yet,
callers always receive a MODERATE verdict.
"""

import structlog

from foodscan.domain.dietary.models import AnalysisVerdict, VerdictStatus

logger = structlog.get_logger(__name__)

COMING_SOON_REASON = "This feature is coming soon."


async def analyze_image(image_uri: str) -> AnalysisVerdict:
    """Analyze a product photo.

    Args:
        image_uri: URI of the captured photo

    Returns:
        MODERATE verdict with a "coming soon" reason
    """
    logger.info("Image analysis requested", image_uri=image_uri)
    return AnalysisVerdict.for_status(VerdictStatus.MODERATE, COMING_SOON_REASON)
