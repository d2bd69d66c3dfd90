from wpmdb_installer.domain.errors import (
    InstallerError,
    MissingKeyError,
    MissingSiteUrlError,
)


def test_missing_key_message():
    err = MissingKeyError("FIELD")
    assert str(err) == (
        "Could not find a key for WP Migrate DB Pro. "
        "Please make it available via the environment variable FIELD"
    )
    assert err.variable == "FIELD"
    assert isinstance(err, InstallerError)


def test_missing_site_url_message_names_variable():
    err = MissingSiteUrlError("APP_URL")
    assert str(err).endswith("environment variable APP_URL")
    assert err.details == {"variable": "APP_URL"}


def test_installer_error_has_message_and_details():
    err = InstallerError("boom", details={"x": 1})
    assert "boom" in str(err)
    assert err.details["x"] == 1
