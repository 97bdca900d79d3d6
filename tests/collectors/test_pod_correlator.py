# tests/collectors/test_pod_correlator.py

from decisionmaker.collectors.pod_correlator import PodCorrelator
from decisionmaker.models.pods import PodProcess


def test_first_process_creates_pod_and_later_ones_append():
    correlator = PodCorrelator()

    correlator.add("pod-a", PodProcess(pid=1, command="pause"))
    correlator.add("pod-b", PodProcess(pid=2))
    correlator.add("pod-a", PodProcess(pid=3))

    pods = correlator.result()
    assert set(pods) == {"pod-a", "pod-b"}
    assert [p.pid for p in pods["pod-a"].processes] == [1, 3]
    assert pods["pod-a"].pod_uid == "pod-a"
    assert len(correlator) == 2


def test_empty_correlator_returns_empty_mapping():
    assert PodCorrelator().result() == {}
