"""
Business logic for saunas.

``SaunaService`` reads and writes the ``saunas`` table through a
``RowStoreClient``.  Lookups by slug are resolved in Python: the whole
catalog is fetched (sorted by name) and matched with the fuzzy slug
helpers.  That linear scan is fine for a catalog of a few hundred
venues; beyond that a stored, indexed slug column would be needed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.locations import approximate_coordinates
from ..core.store import RowStoreClient, is_row_id
from ..schemas.sauna import (
    BookingType,
    SaunaCreate,
    SaunaDetail,
    SaunaMarker,
    SaunaRead,
    SaunaUpdate,
    Setting,
)
from ..utils.opening_hours import format_opening_hours, is_sauna_open
from ..utils.slug import find_by_slug, generate_sauna_slug

logger = logging.getLogger(__name__)

TABLE = "saunas"


class SaunaService:
    """Service for querying and editing saunas.

    Parameters
    ----------
    client : RowStoreClient
        Connected row store client.  The service does not own it and
        never closes it.
    """

    def __init__(self, client: RowStoreClient) -> None:
        self.client = client

    async def list_saunas(
        self,
        setting: Optional[Setting] = None,
        booking_type: Optional[BookingType] = None,
        has_lake_access: Optional[bool] = None,
    ) -> List[SaunaRead]:
        """Return all saunas ordered by name, optionally filtered by equality."""
        filters: Dict[str, Any] = {
            "setting": setting.value if setting else None,
            "booking_type": booking_type.value if booking_type else None,
            "has_lake_access": has_lake_access,
        }
        rows = await self.client.select(TABLE, filters=filters, order="name")
        return [SaunaRead.model_validate(row) for row in rows]

    async def get_sauna_by_id(self, sauna_id: str) -> Optional[SaunaRead]:
        """Return one sauna, or ``None`` if the id is unknown."""
        if not is_row_id(sauna_id):
            return None
        row = await self.client.select_one(TABLE, filters={"id": sauna_id})
        if row is None:
            return None
        return SaunaRead.model_validate(row)

    async def get_sauna_by_slug(self, slug: str) -> Optional[SaunaRead]:
        """Resolve a URL slug to a sauna.

        The first sauna, in name order, whose name matches the slug is
        returned.  ``None`` when nothing matches.
        """
        saunas = await self.list_saunas()
        sauna = find_by_slug(slug, saunas, key=lambda s: s.name)
        if sauna is None:
            logger.debug("No sauna matches slug %r among %d saunas", slug, len(saunas))
        return sauna

    async def create_sauna(self, data: SaunaCreate) -> SaunaRead:
        """Insert a sauna and return the stored record."""
        rows = await self.client.insert(TABLE, [data.model_dump(mode="json")])
        sauna = SaunaRead.model_validate(rows[0])
        logger.info("Created sauna %s (%s)", sauna.id, sauna.name)
        return sauna

    async def update_sauna(self, sauna_id: str, data: SaunaUpdate) -> Optional[SaunaRead]:
        """Apply a partial update.

        Only fields explicitly set on ``data`` are sent.  Returns the
        updated sauna, or ``None`` if no sauna has this id.
        """
        if not is_row_id(sauna_id):
            return None
        values = data.model_dump(mode="json", exclude_unset=True)
        if not values:
            return await self.get_sauna_by_id(sauna_id)
        rows = await self.client.update(TABLE, values, filters={"id": sauna_id})
        if not rows:
            return None
        logger.info("Updated sauna %s: %s", sauna_id, ", ".join(sorted(values)))
        return SaunaRead.model_validate(rows[0])

    async def list_markers(self) -> List[SaunaMarker]:
        """Return map marker data for every sauna."""
        saunas = await self.list_saunas()
        return [
            SaunaMarker(
                id=sauna.id,
                name=sauna.name,
                slug=generate_sauna_slug(sauna.name),
                address=sauna.address,
                setting=sauna.setting,
                coordinates=approximate_coordinates(sauna.address),
            )
            for sauna in saunas
        ]

    @staticmethod
    def to_detail(
        sauna: SaunaRead, now: Optional[datetime] = None, timezone: Optional[str] = None
    ) -> SaunaDetail:
        """Add slug and open/closed information for the detail page."""
        hours = sauna.opening_hours.as_dict()
        return SaunaDetail(
            **sauna.model_dump(),
            slug=generate_sauna_slug(sauna.name),
            is_open=is_sauna_open(hours, now=now, timezone=timezone),
            formatted_hours=format_opening_hours(hours),
        )
