import pytest

from basesetup.managers import Session
from basesetup.pages import LoginPage
from testsuites.unit.fakes import FakePage


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch):
    monkeypatch.setattr("basesetup.locators.base_locators.time.sleep", lambda seconds: None)


def make_page(results=None, url="about:blank"):
    page = FakePage(results=results, url=url)
    session = Session(thread_id=1, engine=None, context=None, page=page)
    return LoginPage(session, base_url="https://shop.test/"), page


def test_url_joins_base_and_path():
    login_page, _ = make_page()
    assert login_page.url == "https://shop.test/"


def test_open_navigates():
    login_page, page = make_page()
    login_page.open()
    assert page.visited == ["https://shop.test/"]


def test_login_looks_up_every_field():
    login_page, page = make_page()
    login_page.login("standard_user", "secret_sauce")

    assert page.lookups == [
        ("placeholder", "Username"),
        ("placeholder", "Password"),
        ("locator", "#login-button"),
    ]


def test_login_with_missing_fields_does_not_raise():
    login_page, _ = make_page(results=[0])
    login_page.login("standard_user", "secret_sauce")
    assert login_page.is_error_displayed("Epic sadface") is False


def test_home_page_detection():
    login_page, _ = make_page(url="https://shop.test/inventory.html")
    assert login_page.is_on_home_page()


def test_screenshot_saved_under_directory(tmp_path):
    login_page, page = make_page()
    path = login_page.screenshot("checkout", directory=tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("checkout_")
    assert page.screenshots == 1


def test_screenshot_defaults_to_configured_directory(tmp_path):
    page = FakePage()
    session = Session(thread_id=1, engine=None, context=None, page=page)
    login_page = LoginPage(session, "https://shop.test", screenshot_dir=tmp_path / "shots")

    path = login_page.screenshot("cart")

    assert path.parent == tmp_path / "shots"
    assert path.parent.is_dir()
