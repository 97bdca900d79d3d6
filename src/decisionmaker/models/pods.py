# src/decisionmaker/models/pods.py

from typing import List

from pydantic import BaseModel, Field


class PodProcess(BaseModel):
    """
    A host process that belongs to a pod.

    Attributes:
        pid: Host PID
        ppid: Parent PID, 0 when the status record could not be parsed
        command: Process name from the process table, empty if unreadable
        container_id: Container runtime ID, empty if not derivable from the cgroup path
    """

    pid: int = Field(..., description="Host PID")
    ppid: int = Field(0, description="Parent PID")
    command: str = Field("", description="Process name")
    container_id: str = Field("", description="Container ID")


class PodInfo(BaseModel):
    """All processes observed for one pod during a discovery scan."""

    pod_uid: str = Field(..., min_length=1, description="Canonical hyphenated pod UID")
    processes: List[PodProcess] = Field(default_factory=list, description="Processes of the pod")
