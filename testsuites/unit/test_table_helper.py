import pytest

from basesetup.helpers import DropdownHelper, TableHelper
from testsuites.unit.fakes import FakeLocator, FakePage, FakeSelect, FakeTable

CUSTOMERS = [
    ["Company", "Contact", "Country", "Action"],
    ["Alfreds Futterkiste", "Maria Anders", "Germany", "edit"],
    ["Centro comercial", "Francisco Chang", "Mexico", "edit"],
]


@pytest.fixture
def table():
    return FakeTable(CUSTOMERS)


@pytest.fixture
def helper():
    return TableHelper(FakePage())


def test_table_data(helper, table):
    assert helper.get_table_data(table) == CUSTOMERS
    assert helper.get_row_count(table) == 3
    assert helper.get_column_count(table) == 4


def test_cell_and_row_access(helper, table):
    assert helper.get_cell_text(table, 1, 2) == "Germany"
    assert helper.get_row_values(table, 2) == CUSTOMERS[2]
    assert helper.get_column_values(table, 0) == [row[0] for row in CUSTOMERS]


@pytest.mark.parametrize("row, col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_cell_returns_empty(helper, table, row, col):
    assert helper.get_cell_text(table, row, col) == ""


def test_out_of_range_sentinels(helper, table):
    assert helper.get_row_values(table, 10) == []
    assert helper.get_column_values(table, 9) == []
    assert helper.find_row_by_cell_text(table, 0, "Nobody") == -1
    assert helper.find_row_by_cell_text(table, 7, "Germany") == -1


def test_ragged_rows_pad_column_values(helper):
    ragged = FakeTable([["a", "b"], ["c"]])
    assert helper.get_column_values(ragged, 1) == ["b", ""]


def test_find_row_and_contains(helper, table):
    assert helper.find_row_by_cell_text(table, 2, "Mexico") == 2
    assert helper.does_table_contain_text(table, "Maria Anders")
    assert not helper.does_table_contain_text(table, "Maria")


def test_clicks(helper, table):
    helper.click_cell(table, 1, 1)
    assert table.rows[1].cells[1].actions == [("click", None)]

    helper.click_cell(table, 5, 5)
    helper.click_icon_by_first_column_text(table, "Centro comercial")
    assert table.rows[2].cells[-1].actions == [("click", None)]


def test_empty_table(helper):
    empty = FakeTable([])
    assert helper.get_table_data(empty) == []
    assert helper.get_row_count(empty) == 0
    assert helper.get_column_count(empty) == 0


def test_driver_errors_return_sentinels(helper):
    dead = FakeLocator(error=RuntimeError("detached"))
    assert helper.get_table_data(dead) == []
    assert helper.get_cell_text(dead, 0, 0) == ""
    assert helper.find_row_by_cell_text(dead, 0, "x") == -1
    assert helper.get_row_count(dead) == 0
    assert helper.does_table_contain_text(dead, "x") is False


OPTIONS = [("", "Select..."), ("az", "Name (A to Z)"), ("lohi", "Price (low to high)")]


def test_dropdown_selection_converges():
    helper = DropdownHelper()
    select = FakeSelect(OPTIONS)

    helper.select_by_text(select, "Price (low to high)")
    assert helper.get_selected_option(select) == "Price (low to high)"

    helper.select_by_value(select, "az")
    assert helper.get_selected_option(select) == "Name (A to Z)"

    helper.select_by_index(select, 0)
    assert helper.get_selected_option(select) == "Select..."


def test_dropdown_options():
    helper = DropdownHelper()
    select = FakeSelect(OPTIONS)

    assert helper.get_all_options(select) == [label for _, label in OPTIONS]
    assert helper.is_option_available(select, "Name (A to Z)")
    assert not helper.is_option_available(select, "Rating")


def test_dropdown_failures_are_swallowed():
    helper = DropdownHelper()
    select = FakeSelect(OPTIONS)

    assert helper.select_by_text(select, "Missing option") is None
    assert helper.get_selected_option(select) == "Select..."
    assert helper.get_all_options(FakeLocator(error=RuntimeError("gone"))) == []
    assert helper.get_selected_option(None) is None
