import allure
import pytest

from webfixture.common import FixtureSettings
from webfixture.errors import ConfigurationError, UnknownWidgetError, UnsupportedActionError
from webfixture.fixture import GenericWebFixture

from testsuites.unit.conftest import SHARED_NAMES_XML


@pytest.fixture
def settings():
    return FixtureSettings(base_url="https://erp.example.com", default_session_date="01/31/2026")


@pytest.fixture
def fixture(batch_list_path, browser, settings):
    return GenericWebFixture(batch_list_path, browser, settings)


def test_builds_from_path(fixture):
    assert fixture.properties.ui_name == "BatchList"
    assert fixture.current_form == ""


def test_builds_from_parsed_properties(batch_list, browser):
    fixture = GenericWebFixture(batch_list, browser)
    assert fixture.properties is batch_list
    assert fixture.settings.base_url == "http://localhost:3000"


def test_relative_path_resolves_against_layout_map_dir(batch_list_path, browser, settings):
    settings = settings.with_overrides(layout_map_dir=str(batch_list_path.parent))
    fixture = GenericWebFixture(batch_list_path.name, browser, settings)
    assert fixture.properties.ui_name == "BatchList"


def test_missing_layout_map(browser, tmp_path):
    with pytest.raises(ConfigurationError):
        GenericWebFixture(tmp_path / "missing.xml", browser)


def test_requires_browser(batch_list_path):
    with pytest.raises(ValueError):
        GenericWebFixture(batch_list_path, None)


def test_type_and_click_use_form_locators(fixture, browser):
    assert fixture.type("batchNumber", "42")
    assert fixture.click("saveButton")

    assert browser.called("type") == [("type", "GL0030_txtBatch", "42")]
    assert browser.called("click") == [("click", "GL0030_btnSave")]
    assert fixture.get_text("batchNumber") == "42"


def test_popup_widgets_need_a_context_switch(fixture, browser):
    with pytest.raises(UnknownWidgetError):
        fixture.click("closeButton")

    fixture.switch_form_context("batchDetail")
    fixture.click("closeButton")
    with pytest.raises(UnknownWidgetError):
        fixture.click("saveButton")

    fixture.switch_form_context()
    fixture.click("saveButton")
    assert [c[1] for c in browser.called("click")] == ["GL0031_btnClose", "GL0030_btnSave"]


def test_unknown_widget_does_not_reach_browser(fixture, browser):
    with pytest.raises(UnknownWidgetError):
        fixture.clear("nope")
    assert browser.calls == []


def test_unsupported_action_propagates(fixture):
    with pytest.raises(UnsupportedActionError):
        fixture.check("saveButton")
    with pytest.raises(UnsupportedActionError):
        fixture.get_text("password")


def test_widget_operations(fixture, browser):
    browser.checked["GL0030_chkReadyToPost"] = False
    browser.checked["GL0030_optPostNow"] = False
    browser.options["GL0030_lstSourceLedger"] = ["GL", "AP"]
    browser.cells["GL0030_grdEntries"] = [["1", "Cash"]]
    browser.present.add("GL0030_lblTitle")

    assert fixture.check("readyToPost")
    assert fixture.is_checked("readyToPost")
    assert fixture.uncheck("readyToPost")
    assert fixture.select("postNow")
    assert fixture.is_selected("postNow")
    assert fixture.select_option("sourceLedger", "AP")
    assert fixture.get_all_options("sourceLedger") == ["GL", "AP"]
    assert fixture.get_selected_options("sourceLedger") == ["AP"]
    assert fixture.get_row_count("entries") == 1
    assert fixture.get_cell_text("entries", 1, 2) == "Cash"
    assert fixture.set_date("batchDate", "01/31/2026")
    assert fixture.type_without_clear("batchNumber", "7")
    assert fixture.is_visible("title")
    assert fixture.exists("title")
    assert not fixture.is_disabled("title")
    assert fixture.wait_for("title")
    assert fixture.wait_for_not_visible("saveButton")


def test_open_navigates_and_waits_for_main_form(fixture, browser):
    browser.present.add("GL0030_txtBatch")
    fixture.switch_form_context("batchDetail")

    assert fixture.open("?batch=12")
    assert browser.url == "https://erp.example.com/GL/BatchList?batch=12"
    assert browser.called("wait_for_element") == [("wait_for_element", "GL0030_txtBatch")]
    assert fixture.current_form == ""


def test_open_reports_a_form_that_never_appears(fixture, browser):
    assert fixture.open() is False
    assert browser.url == "https://erp.example.com/GL/BatchList"


def test_wait_for_form(fixture, browser):
    browser.present.add("GL0031_btnClose")

    assert fixture.wait_for_form("batchDetail")
    assert not fixture.wait_for_form()
    fixture.switch_form_context("batchDetail")
    assert fixture.wait_for_form()


def test_wait_for_form_step_names_the_awaited_form(fixture, browser, monkeypatch):
    titles = []
    real_step = allure.step

    def recording_step(title):
        titles.append(title)
        return real_step(title)

    monkeypatch.setattr(allure, "step", recording_step)
    browser.present.add("GL0030_txtBatch")
    fixture.switch_form_context("batchDetail")

    assert fixture.wait_for_form("")
    assert browser.called("wait_for_element") == [("wait_for_element", "GL0030_txtBatch")]
    assert titles == ["Wait for form '<main>'"]

    fixture.wait_for_form()
    assert titles[-1] == "Wait for form 'batchDetail'"


def test_frame_state_is_kept_per_fixture(fixture, browser):
    assert fixture.switch_to_frame("contentFrame")
    assert fixture.context.iframe == "contentFrame"
    assert browser.frame == "contentFrame"

    assert fixture.switch_to_default_content()
    assert fixture.context.iframe is None
    assert browser.frame is None


def test_failed_frame_switch_clears_frame_state(fixture, browser):
    browser.fail_frame = True
    with pytest.raises(RuntimeError):
        fixture.switch_to_frame("missingFrame")
    assert fixture.context.iframe is None


def test_change_layout_map(fixture, browser, write_layout):
    fixture.switch_form_context("batchDetail")
    fixture.switch_to_frame("contentFrame")

    properties = fixture.change_layout_map(write_layout(SHARED_NAMES_XML))

    assert properties.ui_name == "Shared"
    assert fixture.properties is properties
    assert fixture.current_form == ""
    assert fixture.context.iframe is None
    assert browser.frame is None
    with pytest.raises(UnknownWidgetError):
        fixture.click("saveButton")


def test_change_layout_map_keeps_previous_map_on_error(fixture, write_layout):
    with pytest.raises(ConfigurationError):
        fixture.change_layout_map(write_layout("<ui name='x' application='GL'/>"))
    assert fixture.properties.ui_name == "BatchList"


def test_redirected_ui_opens_base_url(browser, write_layout, settings):
    xml = SHARED_NAMES_XML.replace('application="AR"', 'application="redirected"')
    fixture = GenericWebFixture(write_layout(xml), browser, settings)

    fixture.open()
    assert browser.url == "https://erp.example.com"


def test_cell_operations_resolve_columns_through_the_layout_map(fixture, browser):
    browser.headers["GL0030_grdEntries"] = [("GL0030_colLine", "Line"), ("GL0030_colAccount", "Account")]
    browser.cells["GL0030_grdEntries"] = [["1", "Cash"], ["2", "Revenue"]]

    assert fixture.get_cell_text_by_column("entries", "accountColumn", 2) == "Revenue"
    assert fixture.get_header_cell_text("entries", "lineColumn") == "Line"
    assert fixture.click_cell("entries", "accountColumn", 1)
    assert browser.called("click_cell") == [("click_cell", "GL0030_grdEntries", 1, 2)]
    assert browser.called("get_column_index")[0] == (
        "get_column_index", "GL0030_grdEntries", "GL0030_colAccount"
    )


@pytest.mark.parametrize("column_name", ["title", "saveButton", "entries"])
def test_column_must_be_declared_inside_the_table(fixture, browser, column_name):
    with pytest.raises(ConfigurationError, match=f"'{column_name}' is not declared as a column"):
        fixture.get_cell_text_by_column("entries", column_name, 1)
    assert browser.called("get_column_index") == []


def test_column_missing_from_the_page(fixture, browser):
    browser.headers["GL0030_grdEntries"] = [("GL0030_colLine", "Line")]
    with pytest.raises(ValueError, match="GL0030_colAccount"):
        fixture.click_cell("entries", "accountColumn", 1)
    assert browser.called("click_cell") == []


def test_cell_operations_need_a_table(fixture):
    with pytest.raises(UnknownWidgetError):
        fixture.get_header_cell_text("entries", "closeButton")
