# src/decisionmaker/models/metrics.py
"""
Pydantic model for the telemetry snapshot reported by the userspace scheduler.
"""

from pydantic import BaseModel, ConfigDict, Field


class MetricSet(BaseModel):
    """
    Latest counters and gauges from the scheduler. The record is frozen: a new
    report replaces the whole snapshot instead of mutating fields.
    """

    model_config = ConfigDict(frozen=True)

    usersched_last_run_at: int = Field(0, ge=0, description="Timestamp of the last user scheduling run.")
    nr_queued: int = Field(0, ge=0, description="Number of tasks queued in the userspace scheduler.")
    nr_scheduled: int = Field(0, ge=0, description="Number of tasks scheduled by the userspace scheduler.")
    nr_running: int = Field(0, ge=0, description="Number of tasks currently running in the userspace scheduler.")
    nr_online_cpus: int = Field(0, ge=0, description="Number of online CPUs in the system.")
    nr_user_dispatches: int = Field(0, ge=0, description="Number of user-space dispatches.")
    nr_kernel_dispatches: int = Field(0, ge=0, description="Number of kernel-space dispatches.")
    nr_cancel_dispatches: int = Field(0, ge=0, description="Number of cancelled dispatches.")
    nr_bounce_dispatches: int = Field(0, ge=0, description="Number of bounced dispatches.")
    nr_failed_dispatches: int = Field(0, ge=0, description="Number of failed dispatches.")
    nr_sched_congested: int = Field(0, ge=0, description="Number of times the scheduler was congested.")
