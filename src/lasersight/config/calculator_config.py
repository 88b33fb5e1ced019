from dataclasses import dataclass

from ..geometry.solver import CalculationMode


@dataclass
class CalculatorConfig:
    """Defaults for a calculator session."""

    default_scanner_id: str = "DT40"
    default_mode: CalculationMode = CalculationMode.WIDTH
    default_angle: float = 8.0          # degrees
    default_distance: float = 10.0      # same unit as width
    length_unit: str = "m"
    display_precision: int = 2          # decimals shown for angle/length
