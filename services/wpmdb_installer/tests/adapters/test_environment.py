from wpmdb_installer.adapters.environment.mapping import MappingEnvironment
from wpmdb_installer.adapters.environment.process import ProcessEnvironment


def test_process_environment_reads_os_environ(tmp_path, monkeypatch):
    monkeypatch.setenv("WPMDB_TEST_VALUE", "from-env")
    env = ProcessEnvironment(cwd=tmp_path)
    assert env.get("WPMDB_TEST_VALUE") == "from-env"
    assert env.get("WPMDB_TEST_UNSET") is None


def test_dotenv_fills_unset_variables_only(tmp_path, monkeypatch):
    # registered with monkeypatch so the value loaded from .env is undone
    monkeypatch.setenv("WPMDB_TEST_KEY", "placeholder")
    monkeypatch.delenv("WPMDB_TEST_KEY")
    monkeypatch.setenv("WPMDB_TEST_SITE", "https://already.set")
    (tmp_path / ".env").write_text(
        "WPMDB_TEST_KEY=from-file\nWPMDB_TEST_SITE=https://from.file\n"
    )
    env = ProcessEnvironment(cwd=tmp_path)
    assert env.get("WPMDB_TEST_KEY") == "from-file"
    assert env.get("WPMDB_TEST_SITE") == "https://already.set"


def test_dotenv_is_loaded_once(tmp_path, monkeypatch):
    monkeypatch.delenv("WPMDB_TEST_ONCE", raising=False)
    env = ProcessEnvironment(cwd=tmp_path)
    assert env.get("WPMDB_TEST_ONCE") is None
    (tmp_path / ".env").write_text("WPMDB_TEST_ONCE=late\n")
    assert env.get("WPMDB_TEST_ONCE") is None


def test_dotenv_can_be_disabled(tmp_path, monkeypatch):
    monkeypatch.delenv("WPMDB_TEST_OFF", raising=False)
    (tmp_path / ".env").write_text("WPMDB_TEST_OFF=value\n")
    assert ProcessEnvironment(cwd=tmp_path, dotenv=False).get("WPMDB_TEST_OFF") is None


def test_mapping_environment_from_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("WPMDB_TEST_SITE", "https://process.wins")
    monkeypatch.delenv("WPMDB_TEST_KEY", raising=False)
    path = tmp_path / "creds.env"
    path.write_text("WPMDB_TEST_KEY=abc\nWPMDB_TEST_SITE=https://file.loses\n")
    env = MappingEnvironment.from_env_file(path)
    assert env.get("WPMDB_TEST_KEY") == "abc"
    assert env.get("WPMDB_TEST_SITE") == "https://process.wins"
