"""End-to-end tests for the farmstats CLI."""

import json

from farmstats.cli.error_handling import RETRYABLE_EXIT_CODE
from farmstats.cli.main import cli


def _invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def test_record_and_report_workflow(cli_runner, temp_db):
    """Record a small farm year and read it back as analytics."""
    steps = [
        ["income", "farm-1", "--date", "2025-01-05", "--amount", "100,000", "--category", "Egg sales"],
        ["expense", "farm-1", "--date", "2025-01-10", "--amount", "40000", "--category", "Feed"],
        ["collect", "farm-1", "--date", "2025-01-05", "--eggs", "120", "--hens", "150", "--house", "A"],
        ["collect", "farm-1", "--date", "2025-01-05", "--eggs", "80", "--hens", "100", "--house", "B"],
        ["flock", "add", "farm-1", "--name", "Layers A", "--health", "80",
         "--productivity", "70", "--feed-efficiency", "90"],
    ]
    for args in steps:
        result = _invoke(cli_runner, temp_db, *args)
        assert result.exit_code == 0, result.output

    result = _invoke(cli_runner, temp_db, "analytics", "farm-1", "--year", "2025")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["incomeExpenses"]) == 12
    assert payload["incomeExpenses"][0]["income"] == 100000.0
    assert payload["incomeExpenses"][0]["netProfit"] == 60000.0
    assert payload["eggTrends"][0]["totalEggs"] == 200
    assert payload["topFlocks"][0]["performance"] == 78.5
    assert payload["summary"]["profitMargin"] == 60.0
    assert payload["summary"]["topFlockCount"] == 1


def test_income_output(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "income", "farm-1", "--date", "2025-03-01", "--amount", "1500.50"
    )

    assert result.exit_code == 0
    assert "Created income 1" in result.output
    assert "UGX 1,500.50" in result.output
    assert "Category: General" in result.output


def test_currency_from_environment(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "expense", "farm-1",
         "--date", "2025-03-01", "--amount", "20"],
        env={"FARMSTATS_CURRENCY": "KES"},
    )

    assert result.exit_code == 0
    assert "KES 20.00" in result.output
    assert temp_db.list_transactions("farm-1")[0].currency == "KES"


def test_invalid_amount(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "income", "farm-1", "--date", "2025-03-01", "--amount", "-10"
    )

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output
    assert temp_db.list_transactions("farm-1") == []


def test_invalid_date(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "collect", "farm-1", "--date", "someday", "--eggs", "1", "--hens", "1"
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_analytics_invalid_year(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "analytics", "farm-1", "--year", "20x5")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_analytics_invalid_sort_field(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "analytics", "farm-1", "--sort-by", "eggs")

    assert result.exit_code != 0


def test_analytics_mixed_currency(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "income", "farm-1", "--date", "2025-03-01", "--amount", "10")
    _invoke(
        cli_runner, temp_db, "income", "farm-1", "--date", "2025-03-02", "--amount", "10",
        "--currency", "USD",
    )

    result = _invoke(cli_runner, temp_db, "analytics", "farm-1", "--year", "2025")

    assert result.exit_code == 1
    assert "currenc" in result.output.lower()


def test_analytics_upstream_failure_is_retryable(cli_runner, temp_db, monkeypatch):
    from farmstats.database.sqlalchemy_db import SQLAlchemyDatabase

    def fail(self, *args, **kwargs):
        raise ConnectionError("database offline")

    monkeypatch.setattr(SQLAlchemyDatabase, "list_transactions", fail)

    result = _invoke(cli_runner, temp_db, "analytics", "farm-1", "--year", "2025")

    assert result.exit_code == RETRYABLE_EXIT_CODE
    assert "Error:" in result.output


def test_financials_weekly(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "income", "farm-1", "--date", "2025-01-05", "--amount", "100")

    result = _invoke(
        cli_runner, temp_db, "financials", "farm-1", "--year", "2025", "--period", "weekly"
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["summary"]["totalRevenue"] == 100.0
    assert payload["growth"]["revenueGrowth"] == 100.0
    assert len(payload["monthlyBreakdown"]) == 1
    assert payload["transactions"]["incomeTransactions"] == 1


def test_egg_stats(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "collect", "farm-1", "--date", "2025-01-05", "--eggs", "90", "--hens", "100")
    result = _invoke(
        cli_runner, temp_db, "sell-eggs", "farm-1", "--date", "2025-01-06", "--quantity", "30",
        "--price", "500", "--customer", "Market", "--payment-method", "mobile",
    )
    assert result.exit_code == 0, result.output
    assert "Recorded sale 1" in result.output

    result = _invoke(cli_runner, temp_db, "egg-stats", "farm-1")

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "totalEggsCollected": 90,
        "totalEggsSold": 30,
        "revenue": 15000.0,
        "collectionRate": 90.0,
    }


def test_flock_list(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "flock", "list", "farm-1")
    assert result.exit_code == 0
    assert "No flocks found." in result.output

    _invoke(
        cli_runner, temp_db, "flock", "add", "farm-1", "--name", "Layers", "--health", "80",
        "--productivity", "70", "--feed-efficiency", "90",
    )
    result = _invoke(cli_runner, temp_db, "flock", "list", "farm-1")

    assert "Layers" in result.output
    assert "80.0" in result.output


def test_flock_add_rejects_out_of_range(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "flock", "add", "farm-1", "--name", "Layers", "--health", "120",
        "--productivity", "70", "--feed-efficiency", "90",
    )

    assert result.exit_code == 1
    assert "between 0 and 100" in result.output


def test_delete_transaction(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "income", "farm-1", "--date", "2025-01-05", "--amount", "100")

    result = _invoke(cli_runner, temp_db, "transaction", "delete", "1")
    assert result.exit_code == 0
    assert "Deleted transaction 1" in result.output

    result = _invoke(cli_runner, temp_db, "transaction", "delete", "1")
    assert result.exit_code == 1
