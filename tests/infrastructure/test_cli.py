"""End-to-end tests of the CLI against a temporary data directory."""

import re

import pytest
import structlog
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args))

    yield _run

    # Log output was bound to the runner's stderr, which is closed now.
    structlog.reset_defaults()


class TestProductAndCartCommands:

    def test_cart_with_conflicting_schedules(self, run):
        assert run("product", "add", "--name", "Coffee", "--price", "12",
                   "--cycle-length", "30").exit_code == 0
        assert run("product", "add", "--name", "Tea", "--price", "9",
                   "--cycle-length", "2", "--cycle-period", "weeks").exit_code == 0
        run("cart", "add", "--customer", "alice", "--product", "Coffee")
        run("cart", "add", "--customer", "alice", "--product", "Tea", "--quantity", "2")

        result = run("cart", "show", "--customer", "alice")

        assert result.exit_code == 0
        assert "Total quantity:    3" in result.output
        assert "Recurring every 30 days, 10 cycles" in result.output
        assert "conflicting shipment schedules" in result.output

    def test_product_list(self, run):
        run("product", "add", "--name", "E-Book", "--price", "5", "--no-shipping")
        result = run("product", "list")
        assert "E-Book" in result.output
        assert "no" in result.output

    def test_empty_cart(self, run):
        result = run("cart", "show", "--customer", "nobody")
        assert result.exit_code == 0
        assert "is empty" in result.output

    def test_unknown_product_is_reported(self, run):
        result = run("cart", "add", "--customer", "alice", "--product", "Ghost")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestGiftCardCommands:

    def test_issue_activate_apply_list(self, run):
        issued = run("giftcard", "issue", "--amount", "25")
        assert issued.exit_code == 0
        code = re.search(r"Gift card (\S+) issued", issued.output).group(1)
        assert len(code) == 13

        run("product", "add", "--name", "Mug", "--price", "8")
        run("cart", "add", "--customer", "alice", "--product", "Mug")
        assert run("giftcard", "apply", "--customer", "alice", "--code", code).exit_code == 0
        assert "No active gift cards" in run("giftcard", "applied", "--customer", "alice").output

        assert run("giftcard", "activate", "--code", code).exit_code == 0
        listed = run("giftcard", "applied", "--customer", "alice")
        assert code in listed.output
        assert "$25.00" in listed.output

        assert run("giftcard", "remove", "--customer", "alice", "--code", code).exit_code == 0
        assert "No active gift cards" in run("giftcard", "applied", "--customer", "alice").output

    def test_activate_unknown_code(self, run):
        result = run("giftcard", "activate", "--code", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output
