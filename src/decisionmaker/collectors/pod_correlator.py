# src/decisionmaker/collectors/pod_correlator.py

from typing import Dict

from ..models.pods import PodInfo, PodProcess


class PodCorrelator:
    """
    Folds scanned processes into PodInfo aggregates keyed by pod UID.
    The first process seen for a UID creates its PodInfo; later ones append,
    so a UID appears at most once in the result.
    """

    def __init__(self):
        self._pods: Dict[str, PodInfo] = {}

    def add(self, pod_uid: str, process: PodProcess) -> PodInfo:
        pod_info = self._pods.get(pod_uid)
        if pod_info is None:
            pod_info = PodInfo(pod_uid=pod_uid, processes=[process])
            self._pods[pod_uid] = pod_info
        else:
            pod_info.processes.append(process)
        return pod_info

    def result(self) -> Dict[str, PodInfo]:
        return self._pods

    def __len__(self) -> int:
        return len(self._pods)
