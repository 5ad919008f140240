from collections.abc import Iterator, Mapping
import functools
import logging
import math
from types import MappingProxyType

import yaml

from .state import Xy


log = logging.getLogger(__name__)

# Range over which the Kim et al. Planckian locus approximation holds.
PLANCKIAN_MIN_KELVIN = 1667
PLANCKIAN_MAX_KELVIN = 25000


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def mireds_to_kelvin(mireds: float) -> float:
    return 1_000_000 / mireds


def kelvin_to_mireds(kelvin: float) -> float:
    return 1_000_000 / kelvin


class KelvinXyLookup(Mapping):
    """Read-only table from integer Kelvin to xy chromaticity."""

    def __init__(self, table: Mapping[int, Xy]) -> None:
        self._table = MappingProxyType(dict(table))

    def __getitem__(self, kelvin: int) -> Xy:
        return self._table[kelvin]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        if not self._table:
            return "KelvinXyLookup({})"
        return (
            f"KelvinXyLookup({len(self._table)} entries, "
            f"{min(self._table)}-{max(self._table)} K)"
        )

    @classmethod
    def from_config(cls, config) -> "KelvinXyLookup":
        assert "kelvin_to_xy" in config
        table = {}
        for kelvin, xy_config in config["kelvin_to_xy"].items():
            assert isinstance(kelvin, int)
            table[kelvin] = Xy(x=float(xy_config["x"]), y=float(xy_config["y"]))
        log.debug(f"Loaded Kelvin to xy lookup with {len(table)} entries")
        return cls(table)

    @classmethod
    def from_yaml(cls, path) -> "KelvinXyLookup":
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
        return cls.from_config(config)

    @classmethod
    def planckian(
        cls,
        min_kelvin: int = PLANCKIAN_MIN_KELVIN,
        max_kelvin: int = PLANCKIAN_MAX_KELVIN,
    ) -> "KelvinXyLookup":
        assert PLANCKIAN_MIN_KELVIN <= min_kelvin <= max_kelvin <= PLANCKIAN_MAX_KELVIN
        table = {}
        for kelvin in range(min_kelvin, max_kelvin + 1):
            x, y = _planckian_xy(kelvin)
            table[kelvin] = Xy(x=round(x, 4), y=round(y, 4))
        return cls(table)


def _planckian_xy(kelvin: float) -> tuple[float, float]:
    # Kim et al. cubic spline fit of the Planckian locus.
    t = kelvin
    if t <= 4000:
        x = -0.2661239e9 / t**3 - 0.2343589e6 / t**2 + 0.8776956e3 / t + 0.179910
    else:
        x = -3.0258469e9 / t**3 + 2.1070379e6 / t**2 + 0.2226347e3 / t + 0.240390

    if t <= 2222:
        y = -1.1063814 * x**3 - 1.34811020 * x**2 + 2.18555832 * x - 0.20219683
    elif t <= 4000:
        y = -0.9549476 * x**3 - 1.37418593 * x**2 + 2.09137015 * x - 0.16748867
    else:
        y = 3.0817580 * x**3 - 5.87338670 * x**2 + 3.75112997 * x - 0.37001483
    return x, y


@functools.cache
def default_lookup() -> KelvinXyLookup:
    """Planckian table covering 1667-25000 K only.

    Temperatures outside that range miss. Inject a wider table through
    KelvinXyLookup or KelvinXyLookup.from_yaml where they are needed.
    """
    return KelvinXyLookup.planckian()


def mireds_to_xy(mireds: float, lookup: KelvinXyLookup | None = None) -> Xy | None:
    if lookup is None:
        lookup = default_lookup()
    kelvin = mireds_to_kelvin(mireds)
    if not math.isfinite(kelvin):
        log.debug(f"No xy for {mireds} mireds, {kelvin} K is not finite")
        return None
    kelvin = _round_half_up(kelvin)
    xy = lookup.get(kelvin)
    if xy is None:
        log.debug(f"No xy for {mireds} mireds ({kelvin} K) in {lookup!r}")
    return xy


def xy_to_mireds(x: float, y: float) -> int:
    # McCamy's cubic approximation of correlated color temperature.
    n = (x - 0.3320) / (0.1858 - y)
    kelvin = 437 * n**3 + 3601 * n**2 + 6861 * n + 5517
    return _round_half_up(kelvin_to_mireds(abs(kelvin)))
