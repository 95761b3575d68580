"""
================================================================================
Unit Test Fixtures
================================================================================

Driver-free fixtures: a recording fake browser and a few layout maps.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set, Tuple

import pytest

from webfixture.configuration import ConfigurationParser
from webfixture.widgets import WidgetFactory


class FakeBrowser:
    """
    In-memory stand-in for the browser driver.

    Every call is appended to `calls` as (method, *args). Element state is
    kept in plain dicts keyed by locator so tests can arrange it directly.
    """

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []
        self.present: Set[str] = set()
        self.disabled: Set[str] = set()
        self.values: Dict[str, str] = {}
        self.checked: Dict[str, bool] = {}
        self.attributes: Dict[Tuple[str, str], str] = {}
        self.options: Dict[str, List[str]] = {}
        self.selected: Dict[str, List[str]] = {}
        self.cells: Dict[str, List[List[str]]] = {}
        # table locator -> header cells as (id, text)
        self.headers: Dict[str, List[Tuple[str, str]]] = {}
        self.url: Optional[str] = None
        self.frame: Optional[str] = None
        self.fail_frame = False
        # DateBox tests: what the field shows after typing, if not the typed value
        self.reformat: Dict[str, str] = {}

    def _record(self, *call: Any) -> None:
        self.calls.append(call)

    def called(self, method: str) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == method]

    def navigate(self, url: str) -> bool:
        self._record("navigate", url)
        self.url = url
        return True

    def click(self, locator: str) -> bool:
        self._record("click", locator)
        if locator in self.checked:
            self.checked[locator] = not self.checked[locator]
        return True

    def type(self, locator: str, text: str) -> bool:
        self._record("type", locator, text)
        self.values[locator] = self.reformat.get(locator, text)
        return True

    def type_without_clear(self, locator: str, text: str) -> bool:
        self._record("type_without_clear", locator, text)
        self.values[locator] = self.values.get(locator, "") + text
        return True

    def clear(self, locator: str) -> bool:
        self._record("clear", locator)
        self.values[locator] = ""
        return True

    def get_text(self, locator: str) -> str:
        self._record("get_text", locator)
        return self.values.get(locator, "")

    def get_attribute(self, locator: str, attribute: str) -> Optional[str]:
        self._record("get_attribute", locator, attribute)
        return self.attributes.get((locator, attribute))

    def is_visible(self, locator: str) -> bool:
        self._record("is_visible", locator)
        return locator in self.present

    def exists(self, locator: str) -> bool:
        self._record("exists", locator)
        return locator in self.present

    def is_enabled(self, locator: str) -> bool:
        self._record("is_enabled", locator)
        return locator not in self.disabled

    def is_checked(self, locator: str) -> bool:
        self._record("is_checked", locator)
        return self.checked.get(locator, False)

    def wait_for_element(self, locator: str) -> bool:
        self._record("wait_for_element", locator)
        return locator in self.present

    def wait_for_no_element(self, locator: str) -> bool:
        self._record("wait_for_no_element", locator)
        return locator not in self.present

    def select_option(self, locator: str, option: str) -> bool:
        self._record("select_option", locator, option)
        self.selected[locator] = [option]
        return True

    def get_all_options(self, locator: str) -> List[str]:
        self._record("get_all_options", locator)
        return list(self.options.get(locator, []))

    def get_selected_options(self, locator: str) -> List[str]:
        self._record("get_selected_options", locator)
        return list(self.selected.get(locator, []))

    def get_cell_text(self, locator: str, row: int, column: int) -> str:
        self._record("get_cell_text", locator, row, column)
        return self.cells[locator][row - 1][column - 1]

    def get_row_count(self, locator: str) -> int:
        self._record("get_row_count", locator)
        return len(self.cells.get(locator, []))

    def get_header_cell_text(self, locator: str, column: int) -> str:
        self._record("get_header_cell_text", locator, column)
        return self.headers[locator][column - 1][1]

    def get_column_index(self, locator: str, column_id: str) -> int:
        self._record("get_column_index", locator, column_id)
        for index, (header_id, _) in enumerate(self.headers.get(locator, []), start=1):
            if header_id.lower() == column_id.lower():
                return index
        return 0

    def click_cell(self, locator: str, row: int, column: int) -> bool:
        self._record("click_cell", locator, row, column)
        return True

    def switch_to_frame(self, frame_id: str) -> bool:
        self._record("switch_to_frame", frame_id)
        if self.fail_frame:
            raise RuntimeError(f"No frame with id '{frame_id}'")
        self.frame = frame_id
        return True

    def switch_to_default_content(self) -> bool:
        self._record("switch_to_default_content")
        self.frame = None
        return True


BATCH_LIST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ui name="BatchList" application="GL" applicationfullname="General Ledger"
    category="G/L Transactions" menuName="Batch List">
  <form type="main" definitionID="GL0030" existenceValidationWidget="batchNumber">
    <widget name="batchNumber" id="txtBatch" type="genericTextBox"/>
    <widget name="password" id="txtPassword" type="genericPasswordTextBox"/>
    <widget name="batchDate" id="dtBatchDate" type="genericDateBox"/>
    <widget name="sourceLedger" id="lstSourceLedger" type="genericListBox"/>
    <widget name="readyToPost" id="chkReadyToPost" type="genericCheckBox"/>
    <widget name="postNow" id="optPostNow" type="genericRadioButton"/>
    <widget name="toolbar" id="pnlToolbar" type="genericPanel">
      <widget name="saveButton" id="btnSave" type="genericButton"/>
      <widget name="detailButton" id="btnDetail" type="genericButton"/>
    </widget>
    <widget name="entries" id="grdEntries" type="genericTable">
      <widget name="lineColumn" id="colLine" type="genericLabel"/>
      <widget name="accountColumn" id="colAccount" type="genericLabel"/>
    </widget>
    <widget name="title" id="lblTitle" type="genericLabel"/>
  </form>
  <form type="popup" name="batchDetail" definitionID="GL0031"
        existenceValidationWidget="closeButton">
    <widget name="entryTab" id="tabEntry" type="cnaTab"/>
    <widget name="closeButton" id="btnClose" type="genericButton"/>
  </form>
</ui>
"""


SHARED_NAMES_XML = """<ui name="Shared" application="AR">
  <form type="main" definitionID="AR1" existenceValidationWidget="w1">
    <widget name="w1" id="one" type="genericButton"/>
  </form>
  <form type="popup" name="A" definitionID="AR2" existenceValidationWidget="w1">
    <widget name="w1" id="one" type="genericButton"/>
  </form>
  <form type="popup" name="B" definitionID="AR3" existenceValidationWidget="w2">
    <widget name="w2" id="two" type="genericButton"/>
  </form>
</ui>
"""


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def factory(browser) -> WidgetFactory:
    return WidgetFactory(browser)


@pytest.fixture
def parser(factory) -> ConfigurationParser:
    return ConfigurationParser(factory)


@pytest.fixture
def batch_list_path(tmp_path):
    path = tmp_path / "gl_batch_list.xml"
    path.write_text(BATCH_LIST_XML, encoding="utf-8")
    return path


@pytest.fixture
def batch_list(parser, batch_list_path):
    return parser.parse(batch_list_path)


@pytest.fixture
def shared_names(parser, tmp_path):
    path = tmp_path / "shared.xml"
    path.write_text(SHARED_NAMES_XML, encoding="utf-8")
    return parser.parse(path)


@pytest.fixture
def write_layout(tmp_path):
    """Write an XML string to a temporary layout map and return its path."""
    counter = {"n": 0}

    def _write(xml: str):
        counter["n"] += 1
        path = tmp_path / f"layout_{counter['n']}.xml"
        path.write_text(xml, encoding="utf-8")
        return path

    return _write
