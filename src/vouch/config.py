"""Configuration for catalogs and sessions."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vouch.errors import Serializer
    from vouch.messages import MessageCatalog

DEFAULT_LOCALE = "en"


@dataclass
class CatalogConfig:
    """Message catalog configuration.

    Attributes:
        default_locale: Locale used when a session does not ask for one
        locale_path: Optional directory of extra ``<code>.yaml`` locale files,
            loaded on top of the shipped ones
    """

    default_locale: str = DEFAULT_LOCALE
    locale_path: Path | None = None

    @classmethod
    def from_env(cls) -> CatalogConfig:
        """Create config from environment variables.

        Resolution:
        1. VOUCH_LOCALE env var for the default locale (default: "en")
        2. VOUCH_LOCALE_PATH env var for an extra locale directory (optional)
        """
        locale_path = os.environ.get("VOUCH_LOCALE_PATH")
        return cls(
            default_locale=os.environ.get("VOUCH_LOCALE") or DEFAULT_LOCALE,
            locale_path=Path(locale_path) if locale_path else None,
        )


@dataclass
class SessionOptions:
    """Options applied when a session is constructed.

    Attributes:
        serializer: Custom serializer replacing the default error shape
        locale: Locale code for this session's messages
        messages: Per-session template overrides, key -> template
        catalog: Catalog to render from; the process-wide catalog if None
    """

    serializer: Serializer | None = None
    locale: str | None = None
    messages: dict[str, str] = field(default_factory=dict)
    catalog: MessageCatalog | None = None
