import json

import httpx

from storefront_tools.common.log_setup import _worker_log_path
from storefront_tools.preflight.site_checker import SiteChecker
from storefront_tools.report_tools.allure_utils import AllureReportProcessor, TestResultSummary


def write_result(directory, name, status, message=None, start=0, stop=1000):
    result = {"name": name, "status": status, "start": start, "stop": stop}
    if message is not None:
        result["statusDetails"] = {"message": message}
    (directory / f"{name}-result.json").write_text(json.dumps(result), encoding="utf-8")


def test_summary_counts_pending_separately(tmp_path):
    write_result(tmp_path, "login", "passed")
    write_result(tmp_path, "locked", "failed")
    write_result(tmp_path, "labels", "skipped", "Pending: I should see the username label")
    write_result(tmp_path, "manual", "skipped", "skipped by marker")
    (tmp_path / "broken-result.json").write_text("{not json", encoding="utf-8")

    summary = AllureReportProcessor(tmp_path).generate_summary()

    assert summary.total == 4
    assert summary.passed == 1
    assert summary.failed == 1
    assert summary.pending == 1
    assert summary.skipped == 1
    assert summary.duration_ms == 4000
    assert summary.pass_rate == 50.0


def test_pass_rate_without_executed_scenarios():
    assert TestResultSummary(total=2, pending=2).pass_rate == 0.0


def test_generate_report_without_allure_cli(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", "")
    processor = AllureReportProcessor(tmp_path / "allure-results", tmp_path / "allure-report")

    assert processor.generate_report() is False


def test_site_checker_reads_status_and_title():
    def handler(request):
        return httpx.Response(200, text="<html><head><title>Swag Labs</title></head></html>")

    status = SiteChecker("https://www.saucedemo.com/", transport=httpx.MockTransport(handler)).check()

    assert status.reachable
    assert status.status_code == 200
    assert status.title == "Swag Labs"
    assert status.response_time_ms >= 0


def test_site_checker_reports_http_errors():
    transport = httpx.MockTransport(lambda request: httpx.Response(503, text="down"))
    checker = SiteChecker("https://www.saucedemo.com/", transport=transport)

    assert checker.check_and_log() is False
    status = checker.check()
    assert status.status_code == 503
    assert status.response_time_ms is not None


def test_site_checker_reports_connection_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    status = SiteChecker("https://www.saucedemo.com/", transport=httpx.MockTransport(handler)).check()

    assert not status.reachable
    assert status.status_code is None
    assert "connection refused" in status.error


def test_worker_log_path(monkeypatch, tmp_path):
    log_file = tmp_path / "automation.log"

    monkeypatch.delenv("PYTEST_XDIST_WORKER", raising=False)
    assert _worker_log_path(log_file) == log_file

    monkeypatch.setenv("PYTEST_XDIST_WORKER", "gw1")
    assert _worker_log_path(log_file) == tmp_path / "automation_gw1.log"
