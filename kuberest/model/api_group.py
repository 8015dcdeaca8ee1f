KUBE_API = "api"
OS_API = "oapi"
API_GROUPS = "apis"
FWD_SLASH = "/"

# prefixes that serve the ungrouped legacy kinds
LEGACY_PREFIXES = (KUBE_API, OS_API)


class ApiGroup:
    """
    The kube object:

    {
      "name": "apps",
      "versions": [
        {
          "groupVersion": "apps/v1",
          "version": "v1"
        }
      ],
      "preferredVersion": {
        "groupVersion": "apps/v1",
        "version": "v1"
      }
    }

    We treat each version as an ApiGroup, where `groupVersion` becomes
    `endpoint`. The legacy /api and /oapi roots have no group name and their
    endpoints are /api/v1 and /oapi/v1.
    """

    def __init__(
        self,
        *,
        name: str,
        prefix: str,
        version: str,
        preferred: bool = True,
    ) -> None:
        self.name = name
        self.prefix = prefix
        self.version = version
        self.preferred = preferred

    def __repr__(self) -> str:
        return "<%s name=%r, prefix=%r, version=%r, preferred=%r>" % (
            self.__class__.__name__,
            self.name,
            self.prefix,
            self.version,
            self.preferred,
        )

    @property
    def is_legacy(self) -> bool:
        return self.prefix in LEGACY_PREFIXES

    @property
    def group_version(self) -> str:
        "apps/v1, or just v1 for the legacy roots"

        if self.is_legacy:
            return self.version

        return f"{self.name}{FWD_SLASH}{self.version}"

    @property
    def endpoint(self) -> str:
        return f"/{self.prefix}/{self.group_version}"


CoreV1 = ApiGroup(name="", prefix=KUBE_API, version="v1")
OpenShiftV1 = ApiGroup(name="", prefix=OS_API, version="v1")
