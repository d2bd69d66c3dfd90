from wpmdb_installer.adapters.environment.mapping import MappingEnvironment
from wpmdb_installer.application.fetch_url import fetch_url_for
from wpmdb_installer.application.sync_lock import resolve_into_lock
from wpmdb_installer.domain.package import PackageRef

NAME = "deliciousbrains/wp-migrate-db-pro"


def _locked(tmp_path):
    lock_path = tmp_path / ".wpmdb-pro.toml"
    resolve_into_lock(
        lock_path,
        PackageRef(NAME, "2.6.10", "https://deliciousbrains.com/dl/wp-migrate-db-pro.zip"),
    )
    return lock_path


def test_fetch_url_for_locked_package(tmp_path):
    env = MappingEnvironment({"WP_MIGRATE_DB_PRO_KEY": "abc", "APP_URL": "https://example.com"})
    result = fetch_url_for(_locked(tmp_path), NAME, env)
    assert result.value == (
        "https://deliciousbrains.com/dl/wp-migrate-db-pro-2.6.10.zip"
        "?licence_key=abc&site_url=example.com"
    )


def test_fetch_url_does_not_touch_lock(tmp_path):
    lock_path = _locked(tmp_path)
    before = lock_path.read_text(encoding="utf-8")
    env = MappingEnvironment({"WP_MIGRATE_DB_PRO_KEY": "abc", "APP_URL": "example.com"})
    fetch_url_for(lock_path, NAME, env)
    assert lock_path.read_text(encoding="utf-8") == before
    assert "abc" not in before


def test_fetch_url_missing_credentials(tmp_path):
    result = fetch_url_for(_locked(tmp_path), NAME, MappingEnvironment({"APP_URL": "x"}))
    assert result.value is None
    assert [d.code for d in result.diagnostics] == ["CREDENTIALS_MISSING"]
    assert "WP_MIGRATE_DB_PRO_KEY" in result.diagnostics[0].message


def test_fetch_url_unknown_package(tmp_path):
    result = fetch_url_for(_locked(tmp_path), "acme/other", MappingEnvironment({}))
    assert [d.code for d in result.diagnostics] == ["LOCK_ENTRY_MISSING"]
