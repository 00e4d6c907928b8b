"""Typed configuration for interpolator behaviour."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace, asdict
from typing import Any, Mapping


@dataclass(frozen=True)
class InterpolationOptions:
    """Configuration knobs shared by the interpolation strategies.

    Args:
        auto_fit: Whether a strategy that needs precomputed state (the
            barycentric weights) fits itself on the first query after
            construction or ``add_point``. When ``False`` such a query raises
            :class:`~qinterp.core.errors.NotFittedError`.
        max_stable_degree: Largest polynomial degree considered well
            conditioned for global polynomial interpolation.
        warn_on_unstable: Emit a ``UserWarning`` when fitting a polynomial of
            degree above ``max_stable_degree``.
    """

    auto_fit: bool = True
    max_stable_degree: int = 20
    warn_on_unstable: bool = True

    def __post_init__(self) -> None:
        if self.max_stable_degree < 0:
            raise ValueError(
                f"max_stable_degree must be non-negative, got {self.max_stable_degree}"
            )

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of supported configuration fields."""

        return {f.name for f in fields(cls)}

    @classmethod
    def from_mapping(
        cls, overrides: InterpolationOptions | Mapping[str, Any] | None = None
    ) -> InterpolationOptions:
        """Build an options instance from optional overrides.

        Args:
            overrides: Either an existing :class:`InterpolationOptions` instance
                or a mapping of field overrides.

        Returns:
            A fully populated :class:`InterpolationOptions` instance.

        Raises:
            TypeError: If ``overrides`` contains unrecognised keys.
        """

        if overrides is None:
            return cls()
        if isinstance(overrides, cls):
            return overrides
        unknown = set(overrides) - cls.field_names()
        if unknown:
            raise TypeError(f"Unknown interpolation option(s): {sorted(unknown)}")
        return replace(cls(), **{name: overrides[name] for name in overrides})

    def to_mapping(self) -> dict[str, Any]:
        """Return a mapping representation of the options."""

        return asdict(self)


__all__ = ["InterpolationOptions"]
