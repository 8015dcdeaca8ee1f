from datetime import datetime
from typing import List, Optional

from kuberest.model.document import RawObject
from kuberest.model.object_model.helpers import maybe_parse_date


class ContainerState:
    """One of running / terminated / waiting. Fields that don't apply to the
    state are None."""

    def __init__(self, key: str, obj: RawObject) -> None:
        self.key = key

        self.startedAt: Optional[datetime] = maybe_parse_date(obj.get("startedAt"))
        self.finishedAt: Optional[datetime] = maybe_parse_date(obj.get("finishedAt"))
        self.exitCode: Optional[int] = obj.get("exitCode")
        self.message: Optional[str] = obj.get("message")
        self.reason: Optional[str] = obj.get("reason")

    def __repr__(self) -> str:
        return "<%s key=%r, reason=%r>" % (
            self.__class__.__name__,
            self.key,
            self.reason,
        )


def parse_container_state(obj: RawObject) -> Optional[ContainerState]:
    for key in ("running", "terminated", "waiting"):
        if key in obj:
            return ContainerState(key, obj[key] or {})

    return None


class ContainerStatus:
    def __init__(self, obj: RawObject) -> None:
        self.name: str = obj["name"]
        self.ready: bool = obj.get("ready", False)
        self.restartCount: int = obj.get("restartCount", 0)
        self.image: Optional[str] = obj.get("image")

        self.state: Optional[ContainerState] = None
        self.lastState: Optional[ContainerState] = None

        state = obj.get("state")
        if state:
            self.state = parse_container_state(state)

        lastState = obj.get("lastState")
        if lastState:
            self.lastState = parse_container_state(lastState)


class PodStatus:
    def __init__(self, status: RawObject) -> None:
        self.phase: Optional[str] = status.get("phase")
        self.startTime: Optional[datetime] = maybe_parse_date(status.get("startTime"))
        self.message: Optional[str] = status.get("message")
        self.reason: Optional[str] = status.get("reason")
        self.containerStatuses: List[ContainerStatus] = [
            ContainerStatus(cont) for cont in status.get("containerStatuses") or []
        ]

    def is_ready(self) -> bool:
        if not self.containerStatuses:
            return False

        return all(cont.ready for cont in self.containerStatuses)
