"""
OpenFoodFacts API client.

Handles HTTP requests to OpenFoodFacts database.
"""

import asyncio
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote

import aiohttp
import structlog

from foodscan.domain.product.openfoodfacts_mapper import OpenFoodFactsMapper
from foodscan.domain.product.openfoodfacts_models import OFFSearchResult
from foodscan.domain.shared.errors import (
    BarcodeNotFoundError,
    ExternalServiceError,
    MalformedResponseError,
    TimeoutError,
)

if TYPE_CHECKING:
    from foodscan.config import ScannerSettings

logger = structlog.get_logger(__name__)


class OpenFoodFactsClient:
    """OpenFoodFacts API client."""

    BASE_URL = "https://world.openfoodfacts.org/api/v0"
    USER_AGENT = "FoodScan/1.0 (python)"

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout_seconds: float = 10,
        max_retries: int = 1,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API root (default: public v0 API)
            user_agent: User-Agent header sent with every request
            timeout_seconds: Request timeout
            max_retries: Max attempts per lookup
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.user_agent = user_agent or self.USER_AGENT
        self.timeout_seconds = timeout_seconds
        self.max_retries = max(1, max_retries)
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, settings: "ScannerSettings") -> "OpenFoodFactsClient":
        """Build a client from scanner settings."""
        return cls(
            base_url=settings.off_base_url,
            user_agent=settings.user_agent,
            timeout_seconds=settings.http_timeout_s,
            max_retries=settings.http_max_retries,
        )

    async def __aenter__(self) -> "OpenFoodFactsClient":
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(headers={"User-Agent": self.user_agent})
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    def product_url(self, barcode: str) -> str:
        """URL of the product endpoint for a barcode."""
        return f"{self.base_url}/product/{quote(barcode.strip(), safe='')}.json"

    async def get_product(self, barcode: str) -> OFFSearchResult:
        """Get product by barcode.

        Args:
            barcode: Decoded barcode payload

        Returns:
            Search result with the product

        Raises:
            BarcodeNotFoundError: If barcode not in database
            TimeoutError: If request times out
            MalformedResponseError: If body is not a product response
            ExternalServiceError: If API error

        Example:
            >>> async def test():
            ...     async with OpenFoodFactsClient() as client:
            ...         return await client.get_product("3017620422003")
        """
        url = self.product_url(barcode)

        for attempt in range(self.max_retries):
            try:
                if not self._session:
                    msg = "Client not initialized, use async with"
                    raise ExternalServiceError(msg)

                async with self._session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
                ) as response:
                    if response.status == 404:
                        logger.info("Barcode not found in OFF", barcode=barcode)
                        raise BarcodeNotFoundError(f"Barcode {barcode} not found")

                    if not 200 <= response.status < 300:
                        msg = f"OpenFoodFacts API error: {response.status}"
                        raise ExternalServiceError(msg)

                    try:
                        data = await response.json(content_type=None)
                    except (aiohttp.ContentTypeError, ValueError) as e:
                        msg = f"OpenFoodFacts returned a non-JSON body: {e}"
                        raise MalformedResponseError(msg) from e

                    result = OpenFoodFactsMapper.parse_product_response(data)

                    if not result.is_found():
                        logger.info("Product not found in OFF", barcode=barcode)
                        raise BarcodeNotFoundError(f"Barcode {barcode} not found")

                    logger.info(
                        "Product found in OFF",
                        barcode=barcode,
                        name=result.product.product_name if result.product else None,
                    )

                    return result

            except (BarcodeNotFoundError, MalformedResponseError):
                # Don't retry on not found or unreadable body
                raise

            except asyncio.TimeoutError as e:
                if attempt == self.max_retries - 1:
                    msg = "OpenFoodFacts API timeout"
                    raise TimeoutError(msg) from e

                wait = 2**attempt
                logger.warning(
                    f"Timeout, retrying in {wait}s",
                    attempt=attempt + 1,
                )
                await asyncio.sleep(wait)

            except aiohttp.ClientError as e:
                if attempt == self.max_retries - 1:
                    msg = f"OpenFoodFacts API client error: {e}"
                    raise ExternalServiceError(msg) from e

                wait = 2**attempt
                await asyncio.sleep(wait)

        raise ExternalServiceError("OpenFoodFacts lookup exhausted retries")
