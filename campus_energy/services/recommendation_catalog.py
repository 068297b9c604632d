# campus_energy/services/recommendation_catalog.py

import logging
from typing import Dict, List

from campus_energy.core.errors import NotFoundError
from campus_energy.models.recommendation import Recommendation

logger = logging.getLogger(__name__)


class RecommendationCatalog:
    def __init__(self):
        self._recs: Dict[str, Recommendation] = {}

    def add(self, rec: Recommendation) -> Recommendation:
        if rec.id in self._recs:
            raise ValueError(f"Duplicate recommendation id: {rec.id}")
        self._recs[rec.id] = rec
        return rec

    def get(self, rec_id: str) -> Recommendation:
        rec = self._recs.get(rec_id)
        if rec is None:
            raise NotFoundError("Recommendation", rec_id)
        return rec

    def all(self) -> List[Recommendation]:
        return list(self._recs.values())

    def apply(self, rec_id: str) -> Recommendation:
        """Mark as applied. Applying twice is a no-op; there is no undo."""
        rec = self.get(rec_id)
        if rec.applied:
            return rec
        rec = rec.model_copy(update={"applied": True})
        self._recs[rec_id] = rec
        logger.info(f"Recommendation {rec_id} applied ({rec.recommendation_type})")
        return rec

    def __len__(self) -> int:
        return len(self._recs)
