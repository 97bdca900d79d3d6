from .cgroup import CgroupMatch, parse_cgroup_line
from .pod_correlator import PodCorrelator
from .process_reader import ProcessInfoReader
from .process_tree import ProcessTreeScanner

__all__ = [
    "CgroupMatch",
    "PodCorrelator",
    "ProcessInfoReader",
    "ProcessTreeScanner",
    "parse_cgroup_line",
]
