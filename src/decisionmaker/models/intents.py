# src/decisionmaker/models/intents.py
"""
Pydantic models for scheduling intents: the per-pod requests received from
the control plane and the per-process records handed to the scheduler.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class Intent(BaseModel):
    """
    A scheduling request targeting one pod. Transient input; it is resolved
    into SchedulingIntent records and never stored as-is.
    """

    pod_id: str = Field(..., description="UID of the target pod.")
    pod_name: str = Field("", description="Name of the target pod.")
    node_id: str = Field("", description="Node the pod is scheduled on.")
    priority: int = Field(0, description="Priority hint; positive values mean elevated priority.")
    execution_time: int = Field(0, description="Execution-time budget hint in nanoseconds.")
    command_regex: str = Field("", description="Filter applied by the scheduler to process commands.")
    pod_labels: Dict[str, str] = Field(default_factory=dict, description="Labels of the target pod.")


class LabelSelector(BaseModel):
    """A single key/value label selector."""

    key: str
    value: str


class SchedulingIntent(BaseModel):
    """
    A resolved, per-process scheduling hint. Identified by the pair
    (source pod id, pid) through its key in the intent store.
    """

    pid: int = Field(..., gt=0, description="Host PID the hint applies to.")
    priority: bool = Field(False, description="True when the source intent had a positive priority.")
    execution_time: int = Field(0, ge=0, description="Execution-time budget in nanoseconds.")
    command_regex: str = Field("", description="Command filter carried over from the intent.")
    selectors: List[LabelSelector] = Field(default_factory=list, description="Selectors built from pod labels.")


class IntentBatch(BaseModel):
    """Request body for intent ingestion."""

    intents: List[Intent] = Field(default_factory=list)
