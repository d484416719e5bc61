"""openFDA drug label lookup."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from pill_identifier.config import settings
from pill_identifier.errors import RegulatoryLookupError
from pill_identifier.models.regulatory import FdaResult

logger = logging.getLogger(__name__)


def build_search_query(medicine_name: str) -> str:
    """Match either the brand or the generic name; brand hits are the most reliable."""
    cleaned = medicine_name.strip().replace('"', "")
    return f'openfda.brand_name:"{cleaned}" OR openfda.generic_name:"{cleaned}"'


class FdaLabelClient:
    """Queries the openFDA label endpoint for a single best match."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url or settings.fda_label_url
        self.timeout = settings.fda_timeout_seconds if timeout is None else timeout

    def lookup(self, medicine_name: str) -> Optional[FdaResult]:
        """Return the label record, or None when the medicine is not listed."""
        params = {"search": build_search_query(medicine_name), "limit": 1}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RegulatoryLookupError(f"FDA API request failed: {exc}") from exc

        if response.status_code == 404:
            logger.info("Medicine %r not found in FDA database.", medicine_name)
            return None
        if not response.ok:
            raise RegulatoryLookupError(
                f"FDA API request failed with status: {response.status_code}"
            )

        try:
            result = FdaResult.model_validate(response.json())
        except ValueError as exc:
            raise RegulatoryLookupError("FDA API returned an unreadable payload.") from exc
        if not result.results:
            return None
        logger.info("Found FDA label for %r", medicine_name)
        return result
