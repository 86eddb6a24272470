from dataclasses import dataclass, replace

from typing_extensions import Self


@dataclass(frozen=True, kw_only=True)
class DurationOptions:
    """Rendering options for format_duration.

    Attributes:
        compact: Use short suffixes without pluralization ("2h 30m")
            instead of full words ("2 hours, 30 minutes")
        max_units: Keep at most this many units, largest first.
            Zero or negative keeps every non-zero unit.
    """

    compact: bool = False
    max_units: int = 2

    def with_compact(self, enabled: bool = True) -> Self:
        """Return a copy with compact rendering switched on (or off)."""
        return replace(self, compact=enabled)

    def with_max_units(self, n: int) -> Self:
        """Return a copy capped at ``n`` units."""
        return replace(self, max_units=n)

    @property
    def unit_limit(self) -> int | None:
        """The effective cap, or None when unlimited."""
        return self.max_units if self.max_units > 0 else None


DEFAULT_OPTIONS = DurationOptions()
