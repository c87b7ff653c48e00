"""
Product resolution service.

Turns a decoded payload into the terminal record shown to the user:
remote lookup, normalization, dietary verdict and fixture overrides.
Every failure degrades to None; callers cannot (and need not) tell
"not found" from "lookup failed".
"""

import time
from typing import Any, Mapping, Optional, Union

import structlog

from foodscan.config import ScannerSettings, load_settings
from foodscan.domain.dietary.analyzer import DietaryAnalyzer
from foodscan.domain.dietary.models import DietaryProfile
from foodscan.domain.product.assembler import ResultAssembler
from foodscan.domain.product.fixtures import (
    FIXTURE_OVERRIDES,
    FixtureOverride,
    find_override,
)
from foodscan.domain.product.models import ResolvedProduct
from foodscan.domain.product.openfoodfacts_mapper import OpenFoodFactsMapper
from foodscan.domain.product.openfoodfacts_models import OFFSearchResult
from foodscan.domain.shared.errors import BarcodeNotFoundError, ProductLookupError
from foodscan.infrastructure.openfoodfacts.api_client import OpenFoodFactsClient

logger = structlog.get_logger(__name__)

ProfileInput = Union[DietaryProfile, Mapping[str, Any], None]


class ProductResolver:
    """Resolves payloads to ResolvedProduct records.

    Flow:
    1. Query OpenFoodFacts
    2. Fixture barcode: return the predetermined record (real image if
       the query produced one)
    3. Found: normalize, evaluate, merge
    4. Not found or failed: None
    """

    def __init__(
        self,
        off_client: OpenFoodFactsClient,
        analyzer: Optional[DietaryAnalyzer] = None,
        overrides: Optional[dict[str, FixtureOverride]] = None,
    ) -> None:
        """Initialize resolver.

        Args:
            off_client: OpenFoodFacts API client (already entered)
            analyzer: Dietary analyzer (default rule registry)
            overrides: Fixture overrides by barcode
        """
        self.off_client = off_client
        self.analyzer = analyzer or DietaryAnalyzer()
        self.overrides = FIXTURE_OVERRIDES if overrides is None else overrides

    async def resolve(self, payload: str, profile: ProfileInput = None) -> Optional[ResolvedProduct]:
        """Resolve a payload for a profile.

        Args:
            payload: Decoded barcode content
            profile: Dietary profile (model or mapping)

        Returns:
            ResolvedProduct, or None when no data is available
        """
        start_time = time.time()
        try:
            barcode = payload.strip() if isinstance(payload, str) else ""
            if not barcode:
                logger.warning("Empty payload, skipping lookup")
                return None

            dietary_profile = _as_profile(profile)
            remote = await self._fetch(barcode)

            override = find_override(barcode, self.overrides)
            if override is not None:
                logger.info(
                    "Fixture barcode, returning predetermined product",
                    barcode=barcode,
                    remote_found=remote is not None,
                )
                return ResultAssembler.assemble(override.product(remote), override.verdict)

            if remote is None or remote.product is None:
                return None

            product = OpenFoodFactsMapper.normalize(remote.product)
            verdict = self.analyzer.evaluate(product, dietary_profile)
            resolved = ResultAssembler.assemble(product, verdict)

            logger.info(
                "Product resolved",
                barcode=barcode,
                product_name=resolved.product_name,
                status=resolved.status.value,
                total_time_ms=round((time.time() - start_time) * 1000, 2),
            )
            return resolved

        except Exception as e:
            logger.error(
                "Product resolution failed",
                payload=payload,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    async def _fetch(self, barcode: str) -> Optional[OFFSearchResult]:
        try:
            return await self.off_client.get_product(barcode)
        except BarcodeNotFoundError:
            logger.info("Product not found in OpenFoodFacts", barcode=barcode)
        except ProductLookupError as e:
            logger.warning(
                "OpenFoodFacts lookup failed",
                barcode=barcode,
                error=str(e),
                error_type=type(e).__name__,
            )
        except Exception as e:
            # Unexpected client failure; fixture overrides still apply
            logger.error(
                "OpenFoodFacts lookup crashed",
                barcode=barcode,
                error=str(e),
                error_type=type(e).__name__,
            )
        return None


async def lookup_product(
    payload: str,
    profile: ProfileInput = None,
    *,
    settings: Optional[ScannerSettings] = None,
    client: Optional[OpenFoodFactsClient] = None,
    analyzer: Optional[DietaryAnalyzer] = None,
) -> Optional[ResolvedProduct]:
    """Look up a product and its verdict. Never raises.

    Args:
        payload: Decoded barcode content
        profile: Dietary profile (model or mapping like {"diets": ["vegan"]})
        settings: Scanner settings (default: from environment)
        client: Entered OpenFoodFacts client to reuse
        analyzer: Dietary analyzer

    Returns:
        ResolvedProduct or None

    Example:
        >>> async def test():
        ...     return await lookup_product("8886467124723", {"diets": ["vegan"]})
    """
    if client is not None:
        return await ProductResolver(client, analyzer).resolve(payload, profile)

    try:
        settings = settings or load_settings()
        async with OpenFoodFactsClient.from_settings(settings) as off_client:
            return await ProductResolver(off_client, analyzer).resolve(payload, profile)
    except Exception as e:
        logger.error("Product lookup failed", payload=payload, error=str(e))
        return None


def _as_profile(profile: ProfileInput) -> DietaryProfile:
    if profile is None:
        return DietaryProfile.empty()
    if isinstance(profile, DietaryProfile):
        return profile
    return DietaryProfile.model_validate(dict(profile))
