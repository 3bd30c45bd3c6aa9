"""Integration tests for end-to-end workflows."""

import json
import re

from jobledger.cli.main import cli


def _run(cli_runner, db_path, *args):
    result = cli_runner.invoke(cli, ["--db-path", db_path, "--user", "foreman", *args])
    assert result.exit_code == 0, result.output
    return result


def _created_id(output: str) -> str:
    match = re.search(r"\(ID: (\d+)\)", output)
    assert match is not None, output
    return match.group(1)


def test_full_workflow(cli_runner, temp_db):
    """Job → companies → receivable, income, expense, payment → balances → stats."""
    db_path = temp_db.database_path

    # Step 1: Create the job
    result = _run(cli_runner, db_path, "job", "create", "Villa", "--start-date", "2024-04-01")
    job_id = _created_id(result.output)

    # Step 2: Add one employer and one employee
    _run(cli_runner, db_path, "company", "add", job_id, "Acme", "--type", "employer")
    _run(cli_runner, db_path, "company", "add", job_id, "Ali Usta", "--type", "employee")

    # Step 3: Record the work and the money
    common = ["--date", "2024-04-10"]
    _run(cli_runner, db_path, "record", "income", job_id, "Acme",
         "--amount", "5000", "--description", "Down payment", *common)
    _run(cli_runner, db_path, "record", "expense", job_id, "Acme",
         "--amount", "750", "--description", "Materials", *common)
    _run(cli_runner, db_path, "record", "receivable", job_id, "Ali Usta",
         "--amount", "3000", "--description", "Tiling", *common)
    _run(cli_runner, db_path, "record", "payment", job_id, "--from", "Acme", "--to", "Ali Usta",
         "--amount", "1000", "--description", "Advance", *common)

    # Step 4: Company balances
    result = _run(cli_runner, db_path, "company", "show", job_id, "Ali Usta")
    assert "₺3.000,00" in result.output
    assert "₺1.000,00" in result.output
    assert "₺2.000,00" in result.output
    assert "Creditor" in result.output

    result = _run(cli_runner, db_path, "company", "show", job_id, "Acme")
    assert "₺5.000,00" in result.output
    assert "₺1.750,00" in result.output
    assert "Debtor" in result.output

    # Step 5: Job statistics
    result = _run(cli_runner, db_path, "job", "show", job_id)
    assert "Total income:" in result.output
    lines = {line.split(":")[0].strip(): line.split(":", 1)[1].strip()
             for line in result.output.splitlines() if line.startswith("  ") and ":" in line}
    assert lines["Total income"] == "₺5.000,00"
    assert lines["Total expense"] == "₺4.750,00"
    assert lines["Net balance"] == "₺250,00"
    assert lines["To be paid"] == "₺3.000,00"
    assert lines["Paid"] == "₺1.000,00"
    assert lines["Remaining"] == "₺2.000,00"

    # Step 6: Overall statistics
    result = _run(cli_runner, db_path, "stats", "--json")
    data = json.loads(result.output)
    assert data["totalIncome"] == "5000.00"
    assert data["totalExpense"] == "4750.00"
    assert data["netBalance"] == "250.00"
    assert data["totalJobs"] == 1

    # Step 7: Removing the employer removes every row it took part in
    _run(cli_runner, db_path, "company", "delete", job_id, "Acme", "--yes")
    result = _run(cli_runner, db_path, "transaction", "list", job_id)
    assert "Tiling" in result.output
    assert "Advance" not in result.output
    assert "Down payment" not in result.output


def test_job_deletion_removes_everything(cli_runner, temp_db):
    db_path = temp_db.database_path

    result = _run(cli_runner, db_path, "job", "create", "Shed")
    job_id = _created_id(result.output)
    _run(cli_runner, db_path, "company", "add", job_id, "Ali Usta", "--type", "employee")
    _run(cli_runner, db_path, "record", "receivable", job_id, "Ali Usta",
         "--amount", "100", "--description", "Framing")

    _run(cli_runner, db_path, "job", "delete", job_id, "--yes")

    result = _run(cli_runner, db_path, "job", "list")
    assert "No jobs found." in result.output
    result = _run(cli_runner, db_path, "stats", "--all-users", "--json")
    assert json.loads(result.output)["totalJobs"] == 0
