"""BaseService — shared foundation for dicectl services.

Collaborators are injected through the constructor; services never build
their own randomness source or renderer.
"""

from __future__ import annotations

import logging

from dicectl.domain.errors import DiceError
from dicectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RollService(BaseService):
            def roll(self, notation: str) -> ServiceResult:
                try:
                    ...
                except DiceError as exc:
                    return self._failure("roll", exc)
    """

    @staticmethod
    def _failure(op: str, exc: DiceError) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        logger.debug("%s failed: %s (%s)", op, exc, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=str(exc),
                detail={"notation": exc.notation},
            ),
        )
