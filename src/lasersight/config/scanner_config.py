import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


def finite_float(value: Any) -> float:
    """Convert to float, rejecting blanks (NaN) and infinities."""
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"expected a finite number, got {value!r}")
    return result


@dataclass(frozen=True)
class ScanSpecPoint:
    """One manufacturer-supplied calibration point of a scanner."""

    angle: float                     # full scan angle (degrees)
    kpps: float                      # thousand points per second
    note: str = ""                   # provenance label, e.g. "ILDA"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScanSpecPoint':
        """Create a point from a ``{angle, kpps, note}`` record."""
        try:
            return cls(
                angle=finite_float(data['angle']),
                kpps=finite_float(data['kpps']),
                note=str(data.get('note', '') or ''),
            )
        except KeyError as e:
            raise KeyError(f"Missing expected field in scan spec: {e}")
        except (ValueError, TypeError, OverflowError) as e:
            raise ValueError(f"Type conversion error for scan spec {dict(data)}: {e}")


@dataclass(frozen=True)
class ScannerModel:
    """
    A scanner model and its sparse angle -> rate specification table.

    ``specs`` is kept in the order it was supplied; it may be unsorted and
    may contain several points for the same angle. ``max_angle`` and
    ``max_kpps`` are hard device ceilings, absent when None.
    """

    name: str
    specs: Tuple[ScanSpecPoint, ...] = field(default_factory=tuple)
    max_angle: Optional[float] = None     # degrees
    max_kpps: Optional[float] = None      # KPPS

    def __post_init__(self):
        # Freeze whatever sequence was handed in
        object.__setattr__(self, 'specs', tuple(self.specs))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScannerModel':
        """
        Create a scanner from a catalog record.

        Accepts both ``maxAngle``/``maxKpps`` and ``max_angle``/``max_kpps``.
        """
        max_angle = data.get('maxAngle', data.get('max_angle'))
        max_kpps = data.get('maxKpps', data.get('max_kpps'))
        try:
            return cls(
                name=str(data['name']),
                specs=tuple(ScanSpecPoint.from_dict(s) for s in data.get('specs', ())),
                max_angle=None if max_angle is None else float(max_angle),
                max_kpps=None if max_kpps is None else float(max_kpps),
            )
        except KeyError as e:
            raise KeyError(f"Missing expected field in scanner record: {e}")
        except (ValueError, TypeError) as e:
            raise ValueError(f"Type conversion error for scanner {data.get('name', 'Unknown')}: {e}")
