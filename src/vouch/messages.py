"""Locale-keyed message catalog.

The catalog maps locale code -> (error key -> template). The shipped English
locale is always loaded and fully populated, so every built-in key resolves
no matter which locale a session asks for:

    requested locale -> default locale -> "en"

A process-wide catalog backs sessions that are not given one explicitly.
It is meant to be configured at process or test setup; mutating it while
validations run elsewhere is unsupported.

Usage:
    from vouch.messages import get_catalog, reset_messages

    get_catalog().register("en", {"not_blank": "{{title}} is required"})
    reset_messages()  # back to the shipped templates
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from vouch.config import DEFAULT_LOCALE, CatalogConfig
from vouch.errors import CatalogError
from vouch.template import render

logger = logging.getLogger(__name__)

_LOCALE_DIR = Path(__file__).parent / "locale"


def load_locale_file(path: Path) -> dict[str, str]:
    """Load a YAML locale file.

    Raises:
        CatalogError: If the file cannot be parsed or is not a flat mapping
    """
    try:
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise CatalogError(f"Could not load locale file {path}: {exc}") from exc

    if data is None:
        return {}
    return _coerce_messages(data, source=str(path))


def _coerce_messages(data: Any, source: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise CatalogError(f"Locale {source} must be a mapping of key to template")

    messages: dict[str, str] = {}
    for key, template in data.items():
        # Guard against YAML 1.1 turning bare true/false keys into booleans
        if isinstance(key, bool):
            key = "true" if key else "false"
        if not isinstance(template, str):
            raise CatalogError(
                f"Template for '{key}' in {source} must be a string, "
                f"got {type(template).__name__}"
            )
        messages[str(key)] = template
    return messages


class MessageCatalog:
    """Templates grouped by locale.

    Example:
        catalog = MessageCatalog(default_locale="es")
        catalog.lookup("not_blank")  # "{{title}} no puede estar en blanco"
    """

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        locale_path: Path | None = None,
    ):
        self._initial_default = default_locale
        self._locale_path = locale_path
        self._locales: dict[str, dict[str, str]] = {}
        self._default_locale = DEFAULT_LOCALE
        self.reset()

    @classmethod
    def from_config(cls, config: CatalogConfig) -> MessageCatalog:
        return cls(default_locale=config.default_locale, locale_path=config.locale_path)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def reset(self) -> None:
        """Restore the shipped templates and the configured default locale."""
        self._locales = {}
        self.load_directory(_LOCALE_DIR)
        if self._locale_path is not None:
            self.load_directory(self._locale_path)

        if self._initial_default in self._locales:
            self._default_locale = self._initial_default
        else:
            logger.warning(
                "Default locale '%s' is not available, using '%s'",
                self._initial_default,
                DEFAULT_LOCALE,
            )
            self._default_locale = DEFAULT_LOCALE

    def load_directory(self, path: Path) -> None:
        """Register every ``<code>.yaml`` file in a directory as a locale."""
        path = Path(path)
        if not path.is_dir():
            raise CatalogError(f"Locale directory {path} does not exist")

        for yaml_file in sorted(path.glob("*.yaml")):
            self.register(yaml_file.stem, load_locale_file(yaml_file))
            logger.debug("Loaded locale '%s' from %s", yaml_file.stem, yaml_file)

    def register(self, locale: str, messages: dict[str, str]) -> None:
        """Merge templates into a locale, creating the locale if needed."""
        coerced = _coerce_messages(messages, source=f"'{locale}'")
        self._locales.setdefault(locale, {}).update(coerced)

    def set_default_locale(self, locale: str) -> None:
        """Change the locale used when a session does not ask for one.

        Raises:
            CatalogError: If the locale has not been registered
        """
        if locale not in self._locales:
            raise CatalogError(
                f"Locale '{locale}' is not registered. "
                "Available locales: " + ", ".join(self.locales())
            )
        self._default_locale = locale

    def has_locale(self, locale: str) -> bool:
        return locale in self._locales

    def locales(self) -> list[str]:
        """List all registered locale codes."""
        return sorted(self._locales)

    def templates(
        self,
        locale: str | None = None,
        overrides: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Effective key -> template mapping for a locale.

        Args:
            locale: Requested locale; unknown codes fall back to the default
            overrides: Templates taking precedence over every locale
        """
        result = dict(self._locales.get(DEFAULT_LOCALE, {}))
        if self._default_locale != DEFAULT_LOCALE:
            result.update(self._locales[self._default_locale])

        if locale and locale != self._default_locale:
            if locale in self._locales:
                result.update(self._locales[locale])
            else:
                logger.warning(
                    "Locale '%s' is not registered, using '%s'", locale, self._default_locale
                )

        if overrides:
            result.update(overrides)
        return result

    def lookup(self, key: str, locale: str | None = None) -> str | None:
        """Template for a key, or None if no locale defines it."""
        return self.templates(locale).get(key)

    def render(
        self,
        key: str,
        params: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> str:
        """Render the template for a key; unknown keys render as the key."""
        template = self.lookup(key, locale)
        if template is None:
            logger.warning("No template for error key '%s'", key)
            template = key
        return render(template, params)


# =============================================================================
# Process-wide catalog
# =============================================================================

_catalog: MessageCatalog | None = None


def get_catalog() -> MessageCatalog:
    """Return the process-wide catalog, building it from the environment."""
    global _catalog
    if _catalog is None:
        _catalog = MessageCatalog.from_config(CatalogConfig.from_env())
    return _catalog


def configure_catalog(config: CatalogConfig) -> MessageCatalog:
    """Replace the process-wide catalog. Call at startup only."""
    global _catalog
    _catalog = MessageCatalog.from_config(config)
    return _catalog


def reset_messages() -> None:
    """Restore the process-wide catalog to its shipped templates.

    Primarily for test isolation.
    """
    global _catalog
    _catalog = None
