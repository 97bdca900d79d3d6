# tests/conftest.py

from pathlib import Path
from typing import Optional

import pytest

POD_UID = "20da609e-6973-4463-a1f9-2db9bcc5becc"
CONTAINER_ID = "10ec3c89629f71226b227e6510b2d465168b24005bbdcc5d7940517080830635"


def pod_cgroup_line(pod_uid: str, container_id: Optional[str] = None) -> str:
    """Build a cgroup v2 line the way kubelet with the systemd driver lays it out."""
    escaped = pod_uid.replace("-", "_")
    line = f"0::/kubelet.slice/kubelet-kubepods.slice/kubelet-kubepods-pod{escaped}.slice"
    if container_id:
        line += f"/cri-containerd-{container_id}.scope"
    return line


class FakeProcTree:
    """Writes a minimal /proc-like layout under a temporary directory."""

    def __init__(self, root: Path):
        self.root = root

    def add_process(
        self,
        pid: int,
        comm: Optional[str] = "app",
        ppid: Optional[int] = 1,
        cgroup: Optional[str] = "0::/init.scope\n",
    ) -> Path:
        proc_dir = self.root / str(pid)
        proc_dir.mkdir(parents=True, exist_ok=True)
        if comm is not None:
            (proc_dir / "comm").write_text(f"{comm}\n")
        if ppid is not None:
            (proc_dir / "stat").write_text(f"{pid} ({comm or 'x'}) S {ppid} {pid} {pid} 0 -1 4194560\n")
        if cgroup is not None:
            (proc_dir / "cgroup").write_text(cgroup)
        return proc_dir

    def add_pod_process(self, pid: int, pod_uid: str, comm: str = "app", ppid: int = 1, container_id: str = ""):
        return self.add_process(pid, comm=comm, ppid=ppid, cgroup=pod_cgroup_line(pod_uid, container_id) + "\n")

    @property
    def path(self) -> str:
        return str(self.root)


@pytest.fixture
def proc_tree(tmp_path):
    """An empty fake process table; tests add processes to it."""
    root = tmp_path / "proc"
    root.mkdir()
    return FakeProcTree(root)


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch, tmp_path):
    """
    Keep config predictable: never scan the real /proc and never read the
    host machine id from tests.
    """
    monkeypatch.setenv("PROC_ROOT", str(tmp_path / "proc"))
    monkeypatch.setenv("MACHINE_ID", "test-machine")


@pytest.fixture
def make_cgroup_line():
    return pod_cgroup_line
