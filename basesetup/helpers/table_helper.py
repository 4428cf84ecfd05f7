"""
================================================================================
Table Helper
================================================================================

Read and interact with HTML tables.

Rows are the table's `tr` elements; cells are the `td`/`th` elements of a
row. Indices are 0-based and checked against the live row/column count, so
out-of-range (or negative) access returns a sentinel instead of failing:

    - cell text / lookups: ""
    - row search: -1
    - row / column / table data: []
    - counts: 0

Author: Automation Team
License: MIT
================================================================================
"""

from typing import List

from loguru import logger
from playwright.sync_api import Locator, Page

ROW_SELECTOR = "tr"
CELL_SELECTOR = "td,th"


def _in_range(index: int, size: int) -> bool:
    return 0 <= index < size


class TableHelper:
    """
    Table scraping helpers.

    Example:
        table = locators.by_css("#customers")
        helper = TableHelper(page)
        row = helper.find_row_by_cell_text(table, 0, "Alfreds Futterkiste")
        country = helper.get_cell_text(table, row, 2)
    """

    def __init__(self, page: Page):
        self.page = page

    def _rows(self, table: Locator) -> List[Locator]:
        return table.locator(ROW_SELECTOR).all()

    def _cells(self, row: Locator) -> List[Locator]:
        return row.locator(CELL_SELECTOR).all()

    def get_table_data(self, table: Locator) -> List[List[str]]:
        """
        Retrieve every row as a list of cell texts.

        Returns:
            List of rows, [] on failure
        """
        try:
            return [row.locator(CELL_SELECTOR).all_inner_texts() for row in self._rows(table)]
        except Exception as e:
            logger.error(f"Failed to retrieve table data: {e}")
            return []

    def get_cell_text(self, table: Locator, row_index: int, col_index: int) -> str:
        """Cell text, or "" if out of bounds."""
        try:
            rows = self._rows(table)
            if not _in_range(row_index, len(rows)):
                return ""

            cells = self._cells(rows[row_index])
            return cells[col_index].inner_text() if _in_range(col_index, len(cells)) else ""
        except Exception as e:
            logger.error(f"Error getting cell text: {e}")
            return ""

    def get_row_values(self, table: Locator, row_index: int) -> List[str]:
        """Cell texts of one row, or [] if out of bounds."""
        try:
            rows = self._rows(table)
            if not _in_range(row_index, len(rows)):
                return []
            return rows[row_index].locator(CELL_SELECTOR).all_inner_texts()
        except Exception as e:
            logger.error(f"Error getting row values: {e}")
            return []

    def click_cell(self, table: Locator, row_index: int, col_index: int) -> None:
        """Click a cell; out-of-range indices are ignored."""
        try:
            rows = self._rows(table)
            if _in_range(row_index, len(rows)):
                cells = self._cells(rows[row_index])
                if _in_range(col_index, len(cells)):
                    cells[col_index].click()
                    logger.info(f"Clicked on cell at row {row_index} and column {col_index}")
        except Exception as e:
            logger.error(f"Error clicking on cell: {e}")

    def find_row_by_cell_text(self, table: Locator, col_index: int, search_text: str) -> int:
        """
        Find the first row whose cell in `col_index` equals `search_text`.

        Returns:
            Row index (0-based) or -1 if not found
        """
        try:
            for i, row in enumerate(self._rows(table)):
                cells = self._cells(row)
                if _in_range(col_index, len(cells)) and cells[col_index].inner_text() == search_text:
                    return i
        except Exception as e:
            logger.error(f"Error finding row by text: {e}")
        return -1

    def click_icon_by_first_column_text(self, table: Locator, search_text: str) -> None:
        """Click the last cell (icon/button) of the row whose first cell matches."""
        try:
            for row in self._rows(table):
                cells = self._cells(row)
                if cells and cells[0].inner_text().strip() == search_text:
                    cells[-1].click()
                    logger.info(f"Clicked on icon in last column for row with text: {search_text}")
                    return
        except Exception as e:
            logger.error(f"Error clicking icon: {e}")

    def get_column_values(self, table: Locator, col_index: int) -> List[str]:
        """
        Values of one column, "" for rows that lack it.

        Returns [] when no row has the column or on failure.
        """
        try:
            values = []
            has_column = False
            for row in self._rows(table):
                cells = self._cells(row)
                if _in_range(col_index, len(cells)):
                    has_column = True
                    values.append(cells[col_index].inner_text())
                else:
                    values.append("")
            return values if has_column else []
        except Exception as e:
            logger.error(f"Error getting column values: {e}")
            return []

    def get_row_count(self, table: Locator) -> int:
        try:
            return table.locator(ROW_SELECTOR).count()
        except Exception as e:
            logger.error(f"Error getting row count: {e}")
            return 0

    def get_column_count(self, table: Locator) -> int:
        """Number of cells in the first row."""
        try:
            rows = self._rows(table)
            return rows[0].locator(CELL_SELECTOR).count() if rows else 0
        except Exception as e:
            logger.error(f"Error getting column count: {e}")
            return 0

    def does_table_contain_text(self, table: Locator, search_text: str) -> bool:
        try:
            return search_text in table.locator(CELL_SELECTOR).all_inner_texts()
        except Exception as e:
            logger.error(f"Error checking table for text: {e}")
            return False


__all__ = [
    "TableHelper",
]
