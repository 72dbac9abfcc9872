"""Configuration for the footnote insertion flow.

The renumbering engine takes no configuration: it is a pure function of
the document. Editor integrations that insert footnotes build an
InsertConfig once (from their settings) and pass it explicitly to
insert_footnote() or the Footnotes class. Nothing here is read implicitly.

Usage:
    from notitas import InsertConfig, insert_footnote

    config = InsertConfig(renumber=False)
    result = insert_footnote(document, offset, "See appendix.", config=config)

    # Or from host settings
    config = InsertConfig.from_dict(settings)

Thread Safety:
    InsertConfig is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from notitas.errors import ConfigError

LINE_ENDINGS: frozenset[str] = frozenset({"\n", "\r\n"})


@dataclass(frozen=True, slots=True)
class InsertConfig:
    """Immutable insertion configuration.

    Attributes:
        renumber: Renumber all footnotes after inserting the new one
        strip_text: Strip surrounding whitespace from the footnote text
        line_ending: Separator for inserted text; None detects it from the
            document ("\\r\\n" if present anywhere, else "\\n")

    """

    renumber: bool = True
    strip_text: bool = True
    line_ending: str | None = None

    def __post_init__(self) -> None:
        if self.line_ending is not None and self.line_ending not in LINE_ENDINGS:
            raise ConfigError("line_ending", f"expected '\\n' or '\\r\\n', got {self.line_ending!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> InsertConfig:
        """Create InsertConfig from dictionary.

        Useful when settings come from a host application's stored data.
        Only includes keys that are valid InsertConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                InsertConfig attribute names.

        Returns:
            New InsertConfig instance with values from dict.

        Example:
            >>> config = InsertConfig.from_dict({
            ...     "renumber": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.renumber
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: InsertConfig = InsertConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "LINE_ENDINGS",
    "InsertConfig",
]
