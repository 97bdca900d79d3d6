# tests/api/test_pods.py
"""Tests for GET /api/v1/pods/pids."""

POD_UID = "7f3c2a10-0b1d-4c5e-9f00-1234abcd5678"


def test_returns_live_pod_map(client, proc_tree):
    proc_tree.add_pod_process(300, POD_UID, comm="pause")
    proc_tree.add_pod_process(301, POD_UID, comm="redis-server", ppid=300, container_id="abc123")

    response = client.get("/api/v1/pods/pids")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["pods"]) == 1
    pod = data["pods"][0]
    assert pod["pod_uid"] == POD_UID
    processes = {p["pid"]: p for p in pod["processes"]}
    assert processes[301] == {"pid": 301, "ppid": 300, "command": "redis-server", "container_id": "abc123"}


def test_empty_node_returns_no_pods(client):
    assert client.get("/api/v1/pods/pids").json()["pods"] == []


def test_discovery_failure_returns_500(broken_client):
    response = broken_client.get("/api/v1/pods/pids")

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "failed to read process table root" in data["error"]
