"""License handling shared by the index and references."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from cffkit.fields import LICENSES

logger = structlog.get_logger(__name__)


class HasLicenseField(Protocol):
    kind: str

    def store_raw(self, field: str, value: Any) -> None:
        ...


def set_license(part: HasLicenseField, value: str | list[str] | tuple[str, ...]) -> None:
    """Set the license, or licenses, of ``part``.

    Only identifiers on the SPDX License List are kept. If none survive, the
    current license is left alone; a single survivor is stored as a string.
    """
    candidates = [value] if isinstance(value, str) else list(value or [])
    accepted = [lic for lic in candidates if isinstance(lic, str) and lic in LICENSES]
    if not accepted:
        logger.debug("model.ignored_value", model=part.kind, field="license", value=value)
        return
    part.store_raw("license", accepted[0] if len(accepted) == 1 else accepted)
