import json
import os
from datetime import datetime, timezone
from typing import Dict

import aiofiles

from ..models.pods import PodInfo
from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    """Writes pods as a JSON document sorted by pod UID, processes by PID."""

    DEFAULT_FILENAME = "decisionmaker-pods.json"

    async def export(self, pods: Dict[str, PodInfo], path: str | None = None) -> str:
        out_path = path or self.DEFAULT_FILENAME
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        document = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "pods": [
                {
                    "pod_uid": pod.pod_uid,
                    "processes": [p.model_dump(mode="json") for p in sorted(pod.processes, key=lambda p: p.pid)],
                }
                for pod in sorted(pods.values(), key=lambda pod: pod.pod_uid)
            ],
        }
        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(document, ensure_ascii=False, indent=2))
        return out_path
