from wpmdb_installer.application.manifest import load_manifest

MANIFEST = """
packages:
  - name: deliciousbrains/wp-migrate-db-pro
    version: "2.6.10"
    source: https://deliciousbrains.com/dl/wp-migrate-db-pro.zip
  - name: deliciousbrains/wp-migrate-db-pro-cli
    version: "*"
    source: https://deliciousbrains.com/dl/wp-migrate-db-pro-cli.zip
"""


def test_load_manifest(tmp_path):
    path = tmp_path / "wpmdb-pro.yaml"
    path.write_text(MANIFEST)
    result = load_manifest(path)
    assert result.diagnostics == []
    assert [p.pretty_version for p in result.value] == ["2.6.10", "*"]
    assert result.value[1].variant.value == "cli"


def test_load_manifest_missing(tmp_path):
    result = load_manifest(tmp_path / "wpmdb-pro.yaml")
    assert [d.code for d in result.diagnostics] == ["MANIFEST_MISSING"]


def test_load_manifest_parse_error(tmp_path):
    path = tmp_path / "wpmdb-pro.yaml"
    path.write_text("packages: [unclosed")
    result = load_manifest(path)
    assert [d.code for d in result.diagnostics] == ["MANIFEST_PARSE_FAILED"]


def test_load_manifest_incomplete_entry(tmp_path):
    path = tmp_path / "wpmdb-pro.yaml"
    path.write_text("packages:\n  - name: deliciousbrains/wp-migrate-db-pro\n")
    result = load_manifest(path)
    assert [d.code for d in result.diagnostics] == ["MANIFEST_ENTRY_INVALID"]
    assert "version, source" in result.diagnostics[0].message


def test_load_manifest_empty_warns(tmp_path):
    path = tmp_path / "wpmdb-pro.yaml"
    path.write_text("")
    result = load_manifest(path)
    assert result.value == []
    assert result.exit_code == 0
    assert [d.code for d in result.diagnostics] == ["MANIFEST_EMPTY"]
