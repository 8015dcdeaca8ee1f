from typing import List, Optional

from kuberest.model.api_group import ApiGroup


class ApiResource:
    """Represents a REST resource available on the kube API server. This is
    the endpoint descriptor handed out by the api type mapper."""

    def __init__(
        self,
        *,
        group: ApiGroup,
        kind: str,
        name: str,
        namespaced: bool,
        verbs: Optional[List[str]] = None,
    ) -> None:
        self.group = group
        self.kind = kind
        self.name = name
        self.namespaced = namespaced
        self.verbs = verbs or []

    def __repr__(self) -> str:
        return "<%s group=%r, kind=%r, name=%r, namespaced=%r, verbs=%r>" % (
            self.__class__.__name__,
            self.group,
            self.kind,
            self.name,
            self.namespaced,
            self.verbs,
        )

    @property
    def prefix(self) -> str:
        return self.group.prefix

    @property
    def api_group_name(self) -> str:
        "Empty for kinds served from the legacy /api and /oapi roots"

        if self.group.is_legacy:
            return ""

        return self.group.name

    @property
    def version(self) -> str:
        return self.group.version

    @property
    def api_version(self) -> str:
        "The apiVersion a document of this kind carries"
        return self.group.group_version

    def supports(self, verb: str) -> bool:
        return verb in self.verbs
