# tests/api/test_metrics.py
"""Tests for scheduler metric ingestion, reads and the Prometheus scrape."""

from decisionmaker.api.routers.metrics import NO_METRICS_MESSAGE

METRICS_PAYLOAD = {
    "usersched_last_run_at": 1700000000,
    "nr_queued": 4,
    "nr_scheduled": 10,
    "nr_running": 2,
    "nr_online_cpus": 8,
    "nr_user_dispatches": 100,
    "nr_kernel_dispatches": 50,
    "nr_cancel_dispatches": 1,
    "nr_bounce_dispatches": 0,
    "nr_failed_dispatches": 0,
    "nr_sched_congested": 3,
}


class TestMetricsApi:
    """Tests for POST/GET /api/v1/metrics."""

    def test_no_data_before_first_update(self, client):
        response = client.get("/api/v1/metrics")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"] is None
        assert data["message"] == NO_METRICS_MESSAGE

    def test_update_then_read(self, client):
        response = client.post("/api/v1/metrics", json=METRICS_PAYLOAD)
        assert response.status_code == 200
        assert response.json()["success"] is True

        data = client.get("/api/v1/metrics").json()

        assert data["data"] == METRICS_PAYLOAD
        assert data["metrics_timestamp"] is not None

    def test_latest_update_wins(self, client):
        client.post("/api/v1/metrics", json=METRICS_PAYLOAD)
        client.post("/api/v1/metrics", json={**METRICS_PAYLOAD, "nr_queued": 99})

        assert client.get("/api/v1/metrics").json()["data"]["nr_queued"] == 99

    def test_negative_counter_is_rejected(self, client):
        response = client.post("/api/v1/metrics", json={**METRICS_PAYLOAD, "nr_queued": -1})

        assert response.status_code == 422


class TestPrometheusScrape:
    """Tests for GET /metrics."""

    def test_scrape_is_empty_before_first_update(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.text == ""

    def test_scrape_exposes_gauges_with_machine_label(self, client):
        client.post("/api/v1/metrics", json=METRICS_PAYLOAD)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'nr_sched_congested{machine_id="test-machine"} 3.0' in response.text
        assert 'user_sched_last_run_at{machine_id="test-machine"} 1.7e+09' in response.text
