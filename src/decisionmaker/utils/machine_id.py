import logging
import socket
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

MACHINE_ID_PATHS = ("/etc/machine-id", "/var/lib/dbus/machine-id")


def get_machine_id(override: Optional[str] = None, paths: Sequence[str] = MACHINE_ID_PATHS) -> str:
    """
    Identity of the reporting host: the explicit override if given, else the
    systemd machine id, else the hostname.
    """
    if override:
        return override
    for path in paths:
        try:
            with open(path, "r") as f:
                machine_id = f.read().strip()
        except OSError:
            continue
        if machine_id:
            return machine_id
    hostname = socket.gethostname()
    logger.warning(f"No machine id found in {', '.join(paths)}; using hostname '{hostname}'.")
    return hostname
