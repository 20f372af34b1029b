"""ContextVar-based footnote configuration for extranotes.

Provides per-call configuration as an immutable dataclass, plus a
context-scoped default used when a caller passes no configuration.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Per call
    from extranotes import add_footnotes, FootnoteConfig

    html = add_footnotes(text, FootnoteConfig(pretty=True))

    # From a host's option mapping (camelCase names accepted)
    html = add_footnotes(text, {"wrapperClass": "notes", "continuous": True})

    # Or change the default for a block of calls
    with footnote_config_context(FootnoteConfig(icon="^")):
        html = add_footnotes(text)

"""

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Any

from extranotes.errors import ConfigError
from extranotes.utils.logger import get_logger
from extranotes.utils.text import is_tag_name

logger = get_logger(__name__)

# Inline tags kept in footnote bodies unless configured otherwise
DEFAULT_INLINE_TAGS = (
    "abbr|a|bdi|bdo|br|b|cite|code|data|del|dfn|em|ins|i|kbd|mark|q|small|span"
    "|strong|sub|sup|s|time|var"
)

# camelCase option names used by CMS host integrations
_OPTION_ALIASES: dict[str, str] = {
    "wrapperClass": "wrapper_class",
    "referenceClass": "reference_class",
    "backrefClass": "backref_class",
    "outputAsArray": "output_as_array",
    "allowedTags": "allowed_tags",
    "keepOrphanDefinitions": "keep_orphan_definitions",
}

_STRING_OPTIONS = ("tag", "icon", "wrapper_class", "reference_class", "backref_class", "allowed_tags")
_BOOL_OPTIONS = ("continuous", "output_as_array", "pretty", "keep_orphan_definitions")


@dataclass(frozen=True, slots=True)
class FootnoteConfig:
    """Immutable footnote configuration.

    Supplied per call; falls back to the context-scoped default.
    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        tag: Element name of the endnotes wrapper
        icon: Back-reference glyph or markup (e.g. an ``<svg>``), inserted raw
        wrapper_class: Class of the endnotes wrapper
        reference_class: Class of each ``<sup>`` reference
        backref_class: Class of each back-reference link
        continuous: Carry numbering across calls within one render
        output_as_array: Return a FootnoteResult instead of appending markup
        pretty: Indent the endnotes markup with tabs and newlines
        allowed_tags: Pipe-delimited tag names kept in definition bodies
        keep_orphan_definitions: Leave definitions without a reference in the text

    """

    tag: str = "div"
    icon: str = "&#8617;"
    wrapper_class: str = "footnotes"
    reference_class: str = "footnote-ref"
    backref_class: str = "footnote-backref"
    continuous: bool = False
    output_as_array: bool = False
    pretty: bool = False
    allowed_tags: str = DEFAULT_INLINE_TAGS
    keep_orphan_definitions: bool = True

    def __post_init__(self) -> None:
        for name in _STRING_OPTIONS:
            if not isinstance(getattr(self, name), str):
                raise ConfigError(name, f"expected str, got {type(getattr(self, name)).__name__}")
        for name in _BOOL_OPTIONS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(name, f"expected bool, got {type(getattr(self, name)).__name__}")
        if not is_tag_name(self.tag):
            raise ConfigError("tag", f"{self.tag!r} is not an element name")

    @property
    def allowed_tag_names(self) -> frozenset[str]:
        """Lower-cased tag names parsed from ``allowed_tags``."""
        return frozenset(
            name.strip().lower() for name in self.allowed_tags.split("|") if name.strip()
        )

    def with_default_tags(self) -> "FootnoteConfig":
        """Return a copy whose allow-list is reset to DEFAULT_INLINE_TAGS."""
        return replace(self, allowed_tags=DEFAULT_INLINE_TAGS)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FootnoteConfig":
        """Create FootnoteConfig from a mapping of options.

        Accepts both the field names and the camelCase option names used by
        CMS hosts (``wrapperClass``, ``outputAsArray``, ...). Unknown keys
        are ignored and logged. ``allowed_tags`` may be given as an iterable
        of tag names instead of a pipe-delimited string, and the boolean
        options accept the integers 0 and 1.

        Args:
            config_dict: Mapping with option values.

        Returns:
            New FootnoteConfig instance.

        Raises:
            ConfigError: If a known option has an invalid value.

        Example:
            >>> config = FootnoteConfig.from_dict({
            ...     "wrapperClass": "notes",
            ...     "pretty": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.wrapper_class
            'notes'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                logger.debug("Ignoring unknown footnote option %r", key)
                continue
            if name == "allowed_tags" and _is_tag_iterable(value):
                value = "|".join(str(v) for v in value)
            elif name in _BOOL_OPTIONS and _is_bool_flag(value):
                value = bool(value)
            filtered[name] = value
        return cls(**filtered)


def _is_tag_iterable(value: object) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


# Hosts that store checkboxes as integers send 0 and 1
def _is_bool_flag(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in (0, 1)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FootnoteConfig = FootnoteConfig()

_footnote_config: ContextVar[FootnoteConfig] = ContextVar(
    "footnote_config",
    default=_DEFAULT_CONFIG,
)


def get_footnote_config() -> FootnoteConfig:
    """Get current default footnote configuration (thread-local).

    Returns:
        The active FootnoteConfig for this thread/context.

    """
    return _footnote_config.get()


def set_footnote_config(config: FootnoteConfig) -> None:
    """Set default footnote configuration for current context.

    Args:
        config: FootnoteConfig instance to use for this context.

    """
    _footnote_config.set(config)


def reset_footnote_config() -> None:
    """Reset to the module-level default configuration."""
    _footnote_config.set(_DEFAULT_CONFIG)


@contextmanager
def footnote_config_context(config: FootnoteConfig) -> Iterator[None]:
    """Context manager for temporary default config changes.

    Args:
        config: FootnoteConfig to use within the context.

    Example:
        >>> with footnote_config_context(FootnoteConfig(pretty=True)):
        ...     html = add_footnotes(text)
        >>> # Automatically reset to previous config

    """
    previous = _footnote_config.get()
    _footnote_config.set(config)
    try:
        yield
    finally:
        _footnote_config.set(previous)


def coerce_config(value: object) -> FootnoteConfig:
    """Turn whatever a caller passed as configuration into a FootnoteConfig.

    None falls back to the context default; a mapping goes through
    from_dict. An option with an invalid value is dropped with a warning
    and the remaining options still apply; a non-mapping is ignored in
    favor of the context default. Never raises.

    Args:
        value: FootnoteConfig, mapping of options, or None.

    Returns:
        A usable FootnoteConfig.

    """
    if value is None:
        return get_footnote_config()
    if isinstance(value, FootnoteConfig):
        return value
    if isinstance(value, Mapping):
        options = dict(value)
        while True:
            try:
                return FootnoteConfig.from_dict(options)
            except ConfigError as e:
                invalid = [key for key in options if _OPTION_ALIASES.get(key, key) == e.option]
                if not invalid:
                    logger.warning("Invalid footnote options, using defaults: %s", e)
                    return get_footnote_config()
                logger.warning("Ignoring invalid footnote option: %s", e)
                for key in invalid:
                    del options[key]
    logger.warning(
        "Footnote options must be a mapping, got %s; using defaults", type(value).__name__
    )
    return get_footnote_config()


__all__ = [
    "DEFAULT_INLINE_TAGS",
    "FootnoteConfig",
    "coerce_config",
    "footnote_config_context",
    "get_footnote_config",
    "reset_footnote_config",
    "set_footnote_config",
]
