"""
Configuration dataclasses for rendering scale calculations.

These immutable config objects decouple display choices from the
calculation functions, so the API, tools and CLI can share standard
configurations.
"""

import os
from dataclasses import dataclass

# Allowlist of accidental symbol styles.
VALID_SYMBOL_STYLES: frozenset[str] = frozenset({"unicode", "ascii"})

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Configuration for rendering a calculated scale.

    Immutable configuration object that can be reused across multiple
    calculate_scale() calls. Only affects display strings; the spelled
    notes themselves never depend on it.

    Attributes:
        symbols: Accidental symbol style. "unicode" renders ♭♭ ♭ ♮ ♯ x,
            "ascii" renders bb b n # x. Defaults to "unicode".
        show_naturals: Keep the natural sign on unaltered notes
            (e.g. "C♮" instead of "C"). Defaults to False.

    Example:
        >>> config = CalculatorConfig(symbols="ascii")
        >>> report = calculate_scale("E", "b", "Dorian", config=config)
    """

    symbols: str = "unicode"
    show_naturals: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.symbols not in VALID_SYMBOL_STYLES:
            raise ValueError(
                f"Unknown symbols {self.symbols!r}, "
                f"valid options: {sorted(VALID_SYMBOL_STYLES)}"
            )

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Build a config from SCALE_CALC_SYMBOLS and SCALE_CALC_SHOW_NATURALS."""
        symbols = os.environ.get("SCALE_CALC_SYMBOLS", "unicode").strip().lower()
        show_naturals = os.environ.get("SCALE_CALC_SHOW_NATURALS", "").strip().lower()
        return cls(symbols=symbols, show_naturals=show_naturals in _TRUTHY)


# Pre-defined configurations for common use cases

DEFAULT_CONFIG = CalculatorConfig()
"""Default configuration: unicode symbols, naturals stripped."""

ASCII_CONFIG = CalculatorConfig(symbols="ascii")
"""Plain-ASCII symbols for terminals and logs without unicode support."""

VERBOSE_CONFIG = CalculatorConfig(show_naturals=True)
"""Unicode symbols with every natural sign kept."""
