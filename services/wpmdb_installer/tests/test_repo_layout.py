from pathlib import Path
import tomllib


def _repo_root() -> Path:
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Could not locate repo root")


def test_repo_layout_basics_exist() -> None:
    root = _repo_root()
    package = root / "services/wpmdb_installer/src/wpmdb_installer"
    assert (package / "schemas/lock.schema.v1.json").exists()
    assert (package / "entrypoints/cli.py").exists()
    for layer in ("domain", "ports", "application", "adapters", "entrypoints"):
        assert (package / layer).is_dir()


def test_pyproject_declares_cli_script() -> None:
    data = tomllib.loads((_repo_root() / "pyproject.toml").read_text(encoding="utf-8"))
    scripts = data["project"]["scripts"]
    assert scripts["wpmdb-pro"] == "wpmdb_installer.entrypoints.cli:app"


def test_domain_does_not_import_outer_layers() -> None:
    domain = _repo_root() / "services/wpmdb_installer/src/wpmdb_installer/domain"
    for path in domain.glob("*.py"):
        text = path.read_text(encoding="utf-8")
        for layer in ("ports", "application", "adapters", "entrypoints"):
            assert f"wpmdb_installer.{layer}" not in text, path.name
