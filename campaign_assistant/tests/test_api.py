"""
API Contract Test Module

Integration tests for the performance-analysis endpoints through the full
FastAPI application, including the {"error": ...} envelope for 400 and 500
responses.
"""

import pytest

from campaign_assistant.services.performance_csv import generate_csv_template
from campaign_assistant.services.report_aggregator import NO_METRICS_ANALYZED


pytestmark = pytest.mark.api


class TestServiceEndpoints:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "Campaign Assistant API"
        assert data["docs"] == "/docs"


class TestPerformanceAnalysis:

    def test_report_shape(self, client, mixed_metrics):
        response = client.post("/performance-analysis", json={
            "goal": "lead_generation",
            "platform": "facebook",
            "metrics": mixed_metrics,
            "past_metrics": {"roas": 2},
        })
        assert response.status_code == 200
        data = response.json()

        assert data["goal"] == "lead_generation"
        assert data["platform"] == "facebook"
        assert data["summary"] == (
            "⚠️ 1 metric is under industry benchmarks. Review suggestions below."
        )
        assert [r["metric"] for r in data["analysis"]] == ["cvr", "roas", "ctr", "impressions"]
        assert [r["flag"] for r in data["analysis"]] == ["on_target", "warning", "good", "on_target"]

        roas = data["analysis"][1]
        assert roas["label"] == "Return on Ad Spend (x)"
        assert roas["value"] == 1.5
        assert roas["past_value"] == 2
        assert roas["status"] == "Needs Attention"
        assert roas["benchmark"] == "2x+"
        assert roas["trend"] == "Declined"
        assert data["adjustment_recommendations"] == [f"[Return on Ad Spend (x)]: {roas['message']}"]

    def test_trend_and_platform_omitted_when_absent(self, client):
        data = client.post("/performance-analysis", json={
            "goal": "engagement",
            "metrics": {"engagement_rate": 2},
        }).json()

        assert "platform" not in data
        assert "trend" not in data["analysis"][0]
        assert data["analysis"][0]["past_value"] is None

    def test_integer_values_echoed_as_integers(self, client):
        data = client.post("/performance-analysis", json={
            "goal": "engagement",
            "metrics": {"aov": 80},
        }).json()
        assert data["analysis"][0]["value"] == 80
        assert isinstance(data["analysis"][0]["value"], int)

    def test_non_numeric_metric_skipped(self, client):
        data = client.post("/performance-analysis", json={
            "goal": "lead_generation",
            "metrics": {"cvr": 5, "ctr": "bad", "roas": 3},
        }).json()
        assert [r["metric"] for r in data["analysis"]] == ["cvr", "roas"]

    def test_empty_metrics(self, client):
        data = client.post("/performance-analysis", json={
            "goal": "lead_generation",
            "metrics": {},
        }).json()
        assert data["analysis"] == []
        assert data["adjustment_recommendations"] == [NO_METRICS_ANALYZED]

    @pytest.mark.parametrize("body", [
        {"metrics": {"cvr": 5}},
        {"goal": "", "metrics": {"cvr": 5}},
        {"goal": "lead_generation"},
        {"goal": "lead_generation", "metrics": [5, 3]},
        {"goal": "lead_generation", "metrics": "cvr=5"},
    ])
    def test_invalid_request_is_400(self, client, body):
        response = client.post("/performance-analysis", json=body)
        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: goal, metrics (must be an object)"
        }

    def test_non_object_body_is_400(self, client):
        response = client.post("/performance-analysis", json=[1, 2, 3])
        assert response.status_code == 400
        assert "error" in response.json()

    def test_unexpected_failure_is_500(self, client, override_catalog):
        override_catalog(object())
        response = client.post("/performance-analysis", json={
            "goal": "lead_generation",
            "metrics": {"cvr": 5},
        })
        assert response.status_code == 500
        assert response.json() == {"error": "An unexpected error occurred."}

    def test_int_beyond_float_range_is_skipped(self, client):
        response = client.post("/performance-analysis", json={
            "goal": "sales_conversions",
            "metrics": {"aov": 10 ** 400, "roas": 3},
        })
        assert response.status_code == 200
        assert [r["metric"] for r in response.json()["analysis"]] == ["roas"]


class TestEvaluateEndpoint:

    def test_fraction_input(self, client):
        response = client.post("/performance-analysis/evaluate", json={
            "metric": "cvr",
            "value": 0.045,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "On Target"
        assert data["label"] == "Conversion Rate (%)"
        assert "trend" not in data

    def test_with_past_value(self, client):
        data = client.post("/performance-analysis/evaluate", json={
            "metric": "bounce_rate",
            "value": 70,
            "past_value": 50,
        }).json()
        assert data["flag"] == "warning"
        assert data["trend"] == "Declined"

    @pytest.mark.parametrize("body", [
        '{"metric": "roas", "value": NaN}',
        '{"metric": "roas", "value": Infinity}',
        '{"metric": "roas", "value": 3, "past_value": NaN}',
    ])
    def test_non_finite_values_are_400(self, client, body):
        response = client.post(
            "/performance-analysis/evaluate",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    def test_non_numeric_value_is_400(self, client):
        response = client.post("/performance-analysis/evaluate", json={
            "metric": "cvr",
            "value": "high",
        })
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")


class TestBenchmarksEndpoint:

    def test_lists_all_benchmarks(self, client):
        data = client.get("/performance-analysis/benchmarks").json()
        metrics = [b["metric"] for b in data["benchmarks"]]
        assert metrics == ["cvr", "cpl", "ctr", "engagement_rate", "bounce_rate", "cpa", "roas", "aov"]

    def test_entry_details(self, client):
        data = client.get("/performance-analysis/benchmarks").json()
        by_key = {b["metric"]: b for b in data["benchmarks"]}

        assert by_key["roas"]["min"] == 2
        assert by_key["roas"]["max"] is None
        assert by_key["bounce_rate"]["kinds"] == ["inverted_polarity", "percentage"]
        assert by_key["cpl"]["label"] == "Cost per Lead ($)"

    def test_uses_injected_catalog(self, client, override_catalog, leads_catalog):
        override_catalog(leads_catalog)
        data = client.get("/performance-analysis/benchmarks").json()
        assert [b["metric"] for b in data["benchmarks"]] == ["leads"]


class TestCsvEndpoints:

    def test_template_download(self, client):
        response = client.get("/performance-analysis/csv-template")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "performance_template.csv" in response.headers["content-disposition"]
        assert response.text == generate_csv_template()

    def test_parse_upload(self, client):
        response = client.post("/performance-analysis/csv", json={
            "csv_text": generate_csv_template(),
        })
        assert response.status_code == 200
        data = response.json()
        assert data["row"]["campaign_name"] == "Campaign A"
        assert data["metrics"] == {
            "impressions": 10000.0,
            "clicks": 500.0,
            "spend": 200.0,
            "conversions": 50.0,
        }

    def test_parse_upload_invalid(self, client):
        response = client.post("/performance-analysis/csv", json={"csv_text": "date\n"})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_parse_upload_too_large(self, client, override_settings):
        override_settings(csv_max_bytes=8)
        response = client.post("/performance-analysis/csv", json={
            "csv_text": generate_csv_template(),
        })
        assert response.status_code == 400
        assert "maximum size" in response.json()["error"]
