import logging
from typing import Dict, Iterable, List, Optional

from kuberest.model.api_group import KUBE_API
from kuberest.model.api_resource import ApiResource


class ApiTypeMapper:
    """Answers which endpoint serves a kind, based on what the server
    advertised during discovery.

    A version may be given bare ("v1") or group qualified ("apps/v1"). An empty
    version asks for whatever the server currently prefers.
    """

    def __init__(self, resources: Iterable[ApiResource] = (), logger=None) -> None:
        self.logger = logger or logging.getLogger("type-mapper")

        # kind -> resources in the order they were advertised
        self.by_kind: Dict[str, List[ApiResource]] = {}
        self.add_resources(resources)

    def __repr__(self) -> str:
        return "<%s kinds=%r>" % (self.__class__.__name__, len(self.by_kind))

    def add_resources(self, resources: Iterable[ApiResource]) -> None:
        for res in resources:
            self.by_kind.setdefault(res.kind, []).append(res)

    def get_kinds(self) -> List[str]:
        return sorted(self.by_kind.keys())

    def is_supported(self, kind: str) -> bool:
        return kind in self.by_kind

    def get_endpoint_for(self, version: Optional[str], kind: str) -> Optional[ApiResource]:
        candidates = self.by_kind.get(kind)
        if not candidates:
            self.logger.debug("No endpoint advertised for kind %r", kind)
            return None

        if version:
            for res in candidates:
                if version in (res.version, res.api_version):
                    return res

            self.logger.debug(
                "Kind %r is advertised but not under version %r", kind, version
            )
            return None

        preferred = [res for res in candidates if res.group.preferred]
        if not preferred:
            return candidates[0]

        for res in preferred:
            if res.prefix == KUBE_API:
                return res

        return preferred[0]
