"""
Table-based aerodynamic coefficients.

Interpolates CL and CD from a 1D table of angle of attack, loaded from a
comma-separated file with rows `alpha_deg, CL, CD` and an optional header.
"""

import logging
from pathlib import Path
from typing import Iterable, Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import DataLoadError

logger = logging.getLogger(__name__)


class AeroDataTable:
    """
    Lift and drag coefficients tabulated against angle of attack.

    Outside the tabulated range lookups return the boundary sample; inside
    they linearly interpolate between the bracketing pair.

    Parameters
    ----------
    points : iterable of (alpha_deg, CL, CD)
        Table rows, angle in degrees. Sorted by angle on construction.

    Attributes
    ----------
    alphas : np.ndarray
        Sample angles of attack, ascending (radians)
    CL : np.ndarray
        Lift coefficient at each sample
    CD : np.ndarray
        Drag coefficient at each sample
    """

    def __init__(self, points: Iterable[Tuple[float, float, float]] = ()):
        data = np.array(list(points), dtype=float).reshape(-1, 3)

        # Stable sort keeps file order for repeated angles
        order = np.argsort(data[:, 0], kind='stable')
        data = data[order]

        self.alphas = np.radians(data[:, 0])
        self.CL = data[:, 1]
        self.CD = data[:, 2]

    @classmethod
    def load_csv(cls, table_file: Union[str, Path]) -> 'AeroDataTable':
        """
        Load a table from CSV.

        Rows whose fields are not all numeric (such as a header row) are
        skipped. Only the first three columns are read.

        Parameters
        ----------
        table_file : str or Path
            Path to CSV file with columns: alpha (deg), CL, CD

        Returns
        -------
        AeroDataTable
            Loaded table

        Raises
        ------
        DataLoadError
            If the file cannot be read or yields no valid points
        """
        table_file = str(table_file)

        try:
            with open(table_file, 'r') as f:
                lines = [line.strip() for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise DataLoadError(f"Failed to open aero data file: {table_file} ({e})",
                                path=table_file) from e

        # Rows may have any number of fields; short rows pad with None
        lines = pd.Series([line for line in lines if line], dtype=object)
        fields = lines.str.split(',', expand=True) if len(lines) else pd.DataFrame()
        if fields.shape[1] < 3:
            raise DataLoadError(f"No valid data found in: {table_file}", path=table_file)

        numeric = fields.iloc[:, :3].apply(
            lambda column: pd.to_numeric(column.str.strip(), errors='coerce')).dropna()
        if numeric.empty:
            raise DataLoadError(f"No valid data found in: {table_file}", path=table_file)

        table = cls(numeric.to_numpy())

        logger.info("Loaded aero table %s: %d points, alpha %.1f to %.1f deg",
                    table_file, len(table),
                    np.degrees(table.min_alpha), np.degrees(table.max_alpha))

        return table

    def __len__(self) -> int:
        return len(self.alphas)

    def is_empty(self) -> bool:
        """True when the table holds no samples."""
        return len(self.alphas) == 0

    @property
    def min_alpha(self) -> float:
        """Smallest tabulated angle of attack (radians), 0 if empty."""
        return float(self.alphas[0]) if len(self.alphas) else 0.0

    @property
    def max_alpha(self) -> float:
        """Largest tabulated angle of attack (radians), 0 if empty."""
        return float(self.alphas[-1]) if len(self.alphas) else 0.0

    def lookup_CL(self, alpha: float) -> float:
        """
        Lift coefficient at angle of attack.

        Parameters
        ----------
        alpha : float
            Angle of attack (radians)
        """
        return self._interpolate(alpha, self.CL)

    def lookup_CD(self, alpha: float) -> float:
        """Drag coefficient at angle of attack (radians)."""
        return self._interpolate(alpha, self.CD)

    def _interpolate(self, alpha: float, values: np.ndarray) -> float:
        if self.is_empty():
            return 0.0
        # np.interp holds the end values outside [alphas[0], alphas[-1]]
        return float(np.interp(alpha, self.alphas, values))

    def __repr__(self):
        if self.is_empty():
            return "AeroDataTable(empty)"
        return (f"AeroDataTable({len(self)} points, "
                f"alpha {np.degrees(self.min_alpha):.1f} to "
                f"{np.degrees(self.max_alpha):.1f} deg)")
