import json
import os
import pandas as pd
from typing import Dict, List, Optional
from ..config.scanner_config import ScannerModel, ScanSpecPoint, finite_float
from .logging_config import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ['Scanner ID', 'Scanner Name', 'Angle', 'KPPS']
OPTIONAL_COLUMNS = ['Note', 'Max Angle', 'Max KPPS']


def _optional_float(value) -> Optional[float]:
    """Blank cells (NaN) mean the ceiling is absent."""
    if value is None or pd.isna(value):
        return None
    return float(value)


class ScannerCatalogLoader:
    """
    Loads the scanner catalog from a CSV or JSON data file.

    CSV files hold one row per specification point; rows sharing a
    ``Scanner ID`` form one scanner, in file order. JSON files hold an object
    keyed by scanner id with ``{name, specs, maxAngle?, maxKpps?}`` records.
    """

    def __init__(self, path: str):
        self.path = path
        self.catalog: Dict[str, ScannerModel] = self._load_catalog()
        logger.info(f"Loaded {len(self.catalog)} scanners from {self.path}")

    def _load_catalog(self) -> Dict[str, ScannerModel]:
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"Scanner catalog not found at path: {self.path}")
        if os.path.splitext(self.path)[1].lower() == '.json':
            return self._load_json()
        return self._build_from_frame(self._load_and_validate_csv())

    def _load_json(self) -> Dict[str, ScannerModel]:
        """Load the keyed JSON catalog."""
        try:
            with open(self.path, encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load JSON from {self.path}: {e}")

        if not isinstance(raw, dict):
            raise ValueError(f"Scanner catalog {self.path} must be an object keyed by scanner id")

        catalog = {}
        for scanner_id, record in raw.items():
            if not isinstance(record, dict):
                raise ValueError(f"Invalid record for scanner '{scanner_id}': expected an object")
            try:
                catalog[str(scanner_id)] = ScannerModel.from_dict(record)
            except KeyError as e:
                raise ValueError(f"Invalid record for scanner '{scanner_id}': {e}")
        return catalog

    def _load_and_validate_csv(self) -> pd.DataFrame:
        """Load CSV and validate required columns."""
        try:
            df = pd.read_csv(self.path)
        except Exception as e:
            raise ValueError(f"Failed to load CSV from {self.path}: {e}")

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise ValueError(f"Missing required columns in CSV: {missing_columns}")

        blank_ids = df.index[df['Scanner ID'].isna()]
        if len(blank_ids):
            raise ValueError(f"Blank Scanner ID in data rows: {[int(i) + 1 for i in blank_ids]}")

        for col in OPTIONAL_COLUMNS:
            if col not in df.columns:
                df[col] = None

        return df

    def _build_from_frame(self, df: pd.DataFrame) -> Dict[str, ScannerModel]:
        catalog = {}
        for scanner_id, rows in df.groupby('Scanner ID', sort=False):
            try:
                specs = tuple(
                    ScanSpecPoint(
                        angle=finite_float(row['Angle']),
                        kpps=finite_float(row['KPPS']),
                        note='' if pd.isna(row['Note']) else str(row['Note']),
                    )
                    for _, row in rows.iterrows()
                )
                max_angles = rows['Max Angle'].dropna()
                max_kpps = rows['Max KPPS'].dropna()
                catalog[str(scanner_id)] = ScannerModel(
                    name=str(rows['Scanner Name'].iloc[0]),
                    specs=specs,
                    max_angle=_optional_float(max_angles.iloc[0]) if not max_angles.empty else None,
                    max_kpps=_optional_float(max_kpps.iloc[0]) if not max_kpps.empty else None,
                )
            except (ValueError, TypeError, OverflowError) as e:
                raise ValueError(f"Type conversion error for scanner {scanner_id}: {e}")

            if len(max_angles.unique()) > 1 or len(max_kpps.unique()) > 1:
                logger.warning(f"Scanner {scanner_id} has conflicting ceilings; using the first row's values")
        return catalog

    def get_scanner(self, scanner_id: str) -> ScannerModel:
        """Get the model for a specific scanner id."""
        if scanner_id not in self.catalog:
            raise ValueError(f"Scanner '{scanner_id}' not found. Available scanners: {self.scanner_ids()}")
        return self.catalog[scanner_id]

    def get_all_scanners(self) -> List[ScannerModel]:
        """Get every scanner model in catalog order."""
        return list(self.catalog.values())

    def scanner_ids(self) -> List[str]:
        return list(self.catalog.keys())
