# src/decisionmaker/collectors/cgroup.py
"""
Pure parsing of control-group descriptor lines into pod and container identity.

A line looks like:

    0::/kubelet.slice/kubelet-kubepods.slice/kubelet-kubepods-pod20da609e_6973_4463_a1f9_2db9bcc5becc.slice/cri-containerd-10ec3c89629f71226b227e6510b2d465168b24005bbdcc5d7940517080830635.scope

The third colon-separated field is the hierarchy path. The segment holding
`pod<uid>` gives the pod UID (systemd escapes the UID's hyphens as
underscores) and a `cri-containerd-<id>.scope` segment gives the container.
"""

import re
from typing import NamedTuple, Optional

KUBEPODS_MARKER = "kubepods"
CONTAINERD_PREFIX = "cri-containerd-"
CONTAINERD_SUFFIX = ".scope"

POD_SEGMENT_REGEX = re.compile(r"pod([0-9a-fA-F_]+)(?:\.slice)?")


class CgroupMatch(NamedTuple):
    pod_uid: str
    container_id: str
    matched: bool


def is_pod_line(line: str) -> bool:
    """True if the line belongs to the Kubernetes pod hierarchy."""
    return KUBEPODS_MARKER in line


def parse_cgroup_hierarchy(path: str) -> CgroupMatch:
    """Extract pod UID and container ID from a cgroup hierarchy path."""
    pod_uid = ""
    container_id = ""
    for segment in path.split("/"):
        match = POD_SEGMENT_REGEX.search(segment)
        if match:
            pod_uid = match.group(1).replace("_", "-")
        if segment.startswith(CONTAINERD_PREFIX) and segment.endswith(CONTAINERD_SUFFIX):
            container_id = segment[len(CONTAINERD_PREFIX) : -len(CONTAINERD_SUFFIX)]

    if not pod_uid:
        return CgroupMatch("", "", False)
    return CgroupMatch(pod_uid, container_id, True)


def parse_cgroup_line(line: str) -> Optional[CgroupMatch]:
    """
    Parse one line of a cgroup descriptor.

    Returns None when the line is not a pod line or carries no hierarchy
    field. Otherwise returns a CgroupMatch; `matched` is False when the line
    is in the pod hierarchy but no pod UID segment could be found.
    """
    if not is_pod_line(line):
        return None
    parts = line.split(":")
    if len(parts) < 3:
        return None
    return parse_cgroup_hierarchy(parts[2])
