from wpmdb_installer.application.result_serialization import serialize_result
from wpmdb_installer.domain.diagnostics import Diagnostic, EntryLocation, Severity
from wpmdb_installer.domain.result import Result


def test_result_serializes_with_schema_version():
    result = Result(
        diagnostics=[
            Diagnostic(
                code="X",
                rule="r",
                severity=Severity.ERROR,
                message="m",
                location=EntryLocation(".wpmdb-pro.toml", 2, "a/b"),
            )
        ],
        artifacts=[{"name": "a/b", "dist_url": "https://x"}],
    )
    data = serialize_result(result, command="resolve", args=["x", "1.2.3"])
    assert data["result_schema_version"] == 1
    assert data["exit_code"] == result.exit_code == 2
    assert data["diagnostics"][0]["location"] == {
        "kind": "entry",
        "path": ".wpmdb-pro.toml",
        "index": 2,
        "name": "a/b",
    }
    assert data["artifacts"][0]["name"] == "a/b"
