"""
Grid layout calculation for screenlists.
"""
from ..core.interfaces import LayoutParams


def div_round_up(a: int, b: int) -> int:
    """Integer division rounding up."""
    c = a // b
    if a % b > 0:
        c += 1
    return c


def scaled_height(thumb_width: int, source_width: int, source_height: int) -> int:
    """Thumbnail height preserving the source aspect ratio (truncated)."""
    return int(source_height * thumb_width / source_width)


class GridLayoutCalculator:
    """Calculates canvas size and thumbnail placement. Strategy Pattern."""

    @staticmethod
    def calculate(
        count: int,
        columns: int,
        thumb_width: int,
        thumb_height: int,
        spacing: int
    ) -> LayoutParams:
        """
        Calculate grid geometry.

        Returns:
            LayoutParams with ``rows`` rows of ``columns`` cells, each cell
            surrounded by ``spacing`` pixels.
        """
        rows = div_round_up(count, columns)
        return LayoutParams(
            thumb_width=thumb_width,
            thumb_height=thumb_height,
            columns=columns,
            rows=rows,
            spacing=spacing,
            canvas_width=columns * thumb_width + (columns + 1) * spacing,
            canvas_height=rows * thumb_height + (rows + 1) * spacing,
        )
