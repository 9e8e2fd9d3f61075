# tests/test_cli.py
from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from emis.cli import app

from .conftest import ROLE_ID_2

runner = CliRunner()


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name: str = "record.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


def test_schemas_lists_registry():
    result = runner.invoke(app, ["schemas", "--contains", "ComprehensiveStaff"])
    assert result.exit_code == 0
    assert "ComprehensiveStaffProfile" in result.output


def test_validate_valid_file(write_json, staff_data):
    result = runner.invoke(app, ["validate", "Staff", write_json(staff_data)])
    assert result.exit_code == 0
    assert "1/1 record(s) valid" in result.output


def test_validate_show_record(write_json, staff_data):
    staff_data["unknownKey"] = 1
    result = runner.invoke(app, ["validate", "Staff", write_json(staff_data), "--show-record"])
    assert result.exit_code == 0
    assert '"employeeNumber": "EMP-001"' in result.output
    assert "unknownKey" not in result.output


def test_validate_array_with_invalid_record(write_json, staff_data):
    bad = dict(staff_data, staffId="nope")
    result = runner.invoke(app, ["validate", "Staff", write_json([staff_data, bad]), "--json"])
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert [r["valid"] for r in payload] == [True, False]
    assert payload[1]["violations"][0]["location"] == "staffId"


def test_validate_unknown_schema(write_json, staff_data):
    result = runner.invoke(app, ["validate", "Teacher", write_json(staff_data)])
    assert result.exit_code == 2


def test_validate_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["validate", "Staff", str(path)])
    assert result.exit_code == 2


def test_rules_pass(write_json, staff_data):
    result = runner.invoke(app, ["rules", write_json(staff_data)])
    assert result.exit_code == 0
    assert "all rules passed" in result.output


def test_rules_primary_role_policy(write_json, staff_data):
    staff_data["roles"].append(dict(staff_data["roles"][0], roleId=ROLE_ID_2, roleType="counselor"))
    path = write_json(staff_data)

    assert runner.invoke(app, ["rules", path, "--policy", "ignore"]).exit_code == 0

    warned = runner.invoke(app, ["rules", path, "--policy", "warn"])
    assert warned.exit_code == 0
    assert "roles.1.isPrimary" in warned.output

    assert runner.invoke(app, ["rules", path, "--policy", "error"]).exit_code == 1
    assert runner.invoke(app, ["rules", path, "--policy", "strict"]).exit_code == 2


def test_rules_on_budget(write_json, budget_data):
    budget_data["totalRemaining"] = 1
    result = runner.invoke(app, ["rules", write_json(budget_data), "--schema", "Budget"])
    assert result.exit_code == 1
    assert "totalRemaining" in result.output
