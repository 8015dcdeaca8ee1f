from typing import Dict, Iterable, Optional, Tuple

from kuberest.exceptions import UnsupportedVersionError
from kuberest.model.kinds import ResourceKind as K

PropertyKeys = Dict[str, Tuple[str, ...]]

BASE_KEYS: PropertyKeys = {
    "name": ("metadata", "name"),
    "namespace": ("metadata", "namespace"),
    "labels": ("metadata", "labels"),
    "annotations": ("metadata", "annotations"),
    "uid": ("metadata", "uid"),
    "resourceVersion": ("metadata", "resourceVersion"),
    "creationTimestamp": ("metadata", "creationTimestamp"),
    "items": ("items",),
}

CORE_VERSIONS = ("v1",)


def openshift_versions(group: str) -> Tuple[str, ...]:
    # legacy /oapi serves plain v1, the group endpoints serve group/v1
    return ("v1", f"{group}.openshift.io/v1")


class PropertyKeyEntry:
    def __init__(self, *, kind: str, versions: Iterable[str], keys: PropertyKeys) -> None:
        self.kind = kind
        self.versions = tuple(versions)
        self.keys = keys

    def __repr__(self) -> str:
        return "<%s kind=%r, versions=%r>" % (
            self.__class__.__name__,
            self.kind,
            self.versions,
        )


class PropertyKeyRegistry:
    """Knows where the fields of each kind live in the wire document.

    Kinds that were never registered get the base keys under any version. A
    registered kind requested under a version it does not declare raises
    UnsupportedVersionError.
    """

    def __init__(self) -> None:
        self.entries: Dict[str, PropertyKeyEntry] = {}

    def register(self, kind: str, versions: Iterable[str], keys: Optional[PropertyKeys] = None) -> None:
        self.entries[kind] = PropertyKeyEntry(kind=kind, versions=versions, keys=keys or {})

    def is_supported(self, version: str, kind: str) -> bool:
        entry = self.entries.get(kind)
        return entry is None or version in entry.versions

    def get(self, version: str, kind: str) -> PropertyKeys:
        keys = dict(BASE_KEYS)

        entry = self.entries.get(kind)
        if entry is None:
            return keys

        if version not in entry.versions:
            raise UnsupportedVersionError(version=version, kind=kind)

        keys.update(entry.keys)
        return keys


def create_default_registry() -> PropertyKeyRegistry:
    reg = PropertyKeyRegistry()

    # Kubernetes kinds
    reg.register(
        K.POD,
        CORE_VERSIONS,
        {
            "phase": ("status", "phase"),
            "podIP": ("status", "podIP"),
            "hostIP": ("status", "hostIP"),
            "containers": ("spec", "containers"),
            "nodeName": ("spec", "nodeName"),
            "restartPolicy": ("spec", "restartPolicy"),
        },
    )
    reg.register(
        K.SERVICE,
        CORE_VERSIONS,
        {
            "selector": ("spec", "selector"),
            "ports": ("spec", "ports"),
            "clusterIP": ("spec", "clusterIP"),
            "type": ("spec", "type"),
        },
    )
    reg.register(
        K.REPLICATION_CONTROLLER,
        CORE_VERSIONS,
        {
            "replicas": ("spec", "replicas"),
            "selector": ("spec", "selector"),
            "template": ("spec", "template"),
            "currentReplicas": ("status", "replicas"),
        },
    )
    reg.register(
        K.STATUS,
        CORE_VERSIONS,
        {
            "status": ("status",),
            "message": ("message",),
            "reason": ("reason",),
            "code": ("code",),
        },
    )
    reg.register(K.CONFIG_MAP, CORE_VERSIONS, {"data": ("data",)})
    reg.register(K.SECRET, CORE_VERSIONS, {"data": ("data",), "type": ("type",)})
    reg.register(
        K.SERVICE_ACCOUNT,
        CORE_VERSIONS,
        {
            "secrets": ("secrets",),
            "imagePullSecrets": ("imagePullSecrets",),
        },
    )
    reg.register(
        K.EVENT,
        CORE_VERSIONS,
        {
            "reason": ("reason",),
            "message": ("message",),
            "type": ("type",),
            "count": ("count",),
            "involvedObject": ("involvedObject",),
        },
    )
    reg.register(K.LIMIT_RANGE, CORE_VERSIONS, {"limits": ("spec", "limits")})
    reg.register(
        K.RESOURCE_QUOTA,
        CORE_VERSIONS,
        {
            "hard": ("spec", "hard"),
            "used": ("status", "used"),
        },
    )
    reg.register(
        K.NAMESPACE,
        CORE_VERSIONS,
        {
            "phase": ("status", "phase"),
            "displayName": ("metadata", "annotations", "openshift.io/display-name"),
            "description": ("metadata", "annotations", "openshift.io/description"),
        },
    )
    reg.register(
        K.PVC,
        CORE_VERSIONS,
        {
            "accessModes": ("spec", "accessModes"),
            "requestedStorage": ("spec", "resources", "requests", "storage"),
            "volumeName": ("spec", "volumeName"),
            "phase": ("status", "phase"),
        },
    )
    reg.register(
        K.PERSISTENT_VOLUME,
        CORE_VERSIONS,
        {
            "capacity": ("spec", "capacity", "storage"),
            "accessModes": ("spec", "accessModes"),
            "reclaimPolicy": ("spec", "persistentVolumeReclaimPolicy"),
            "phase": ("status", "phase"),
        },
    )
    reg.register(K.LIST, CORE_VERSIONS)

    # OpenShift kinds
    build = openshift_versions("build")
    reg.register(
        K.BUILD,
        build,
        {
            "phase": ("status", "phase"),
            "message": ("status", "message"),
            "outputTo": ("spec", "output", "to"),
        },
    )
    reg.register(
        K.BUILD_CONFIG,
        build,
        {
            "source": ("spec", "source"),
            "strategy": ("spec", "strategy"),
            "triggers": ("spec", "triggers"),
            "outputTo": ("spec", "output", "to"),
        },
    )
    reg.register(
        K.BUILD_REQUEST,
        build,
        {
            "triggeredBy": ("triggeredBy",),
            "env": ("env",),
        },
    )
    reg.register(
        K.DEPLOYMENT_CONFIG,
        openshift_versions("apps"),
        {
            "replicas": ("spec", "replicas"),
            "selector": ("spec", "selector"),
            "template": ("spec", "template"),
            "triggers": ("spec", "triggers"),
            "latestVersion": ("status", "latestVersion"),
        },
    )

    image = openshift_versions("image")
    reg.register(
        K.IMAGE_STREAM,
        image,
        {
            "dockerImageRepository": ("spec", "dockerImageRepository"),
            "tags": ("spec", "tags"),
            "statusTags": ("status", "tags"),
        },
    )
    reg.register(
        K.IMAGE_STREAM_IMPORT,
        image,
        {
            "import": ("spec", "import"),
            "images": ("spec", "images"),
            "statusImages": ("status", "images"),
        },
    )

    oauth = openshift_versions("oauth")
    token_keys: PropertyKeys = {
        "clientName": ("clientName",),
        "userName": ("userName",),
        "expiresIn": ("expiresIn",),
        "scopes": ("scopes",),
    }
    reg.register(K.OAUTH_ACCESS_TOKEN, oauth, token_keys)
    reg.register(K.OAUTH_AUTHORIZE_TOKEN, oauth, token_keys)
    reg.register(
        K.OAUTH_CLIENT,
        oauth,
        {
            "secret": ("secret",),
            "redirectURIs": ("redirectURIs",),
            "grantMethod": ("grantMethod",),
        },
    )
    reg.register(
        K.OAUTH_CLIENT_AUTHORIZATION,
        oauth,
        {
            "clientName": ("clientName",),
            "userName": ("userName",),
            "scopes": ("scopes",),
        },
    )

    project = openshift_versions("project")
    reg.register(
        K.PROJECT,
        project,
        {
            "phase": ("status", "phase"),
            "displayName": ("metadata", "annotations", "openshift.io/display-name"),
            "description": ("metadata", "annotations", "openshift.io/description"),
        },
    )
    reg.register(
        K.PROJECT_REQUEST,
        project,
        {
            "displayName": ("displayName",),
            "description": ("description",),
        },
    )

    # rbac serves Role and RoleBinding too
    authz = openshift_versions("authorization") + ("rbac.authorization.k8s.io/v1",)
    reg.register(K.POLICY, authz, {"roles": ("roles",)})
    reg.register(
        K.POLICY_BINDING,
        authz,
        {
            "policyRef": ("policyRef",),
            "roleBindings": ("roleBindings",),
        },
    )
    reg.register(K.ROLE, authz, {"rules": ("rules",)})
    reg.register(
        K.ROLE_BINDING,
        authz,
        {
            "roleRef": ("roleRef",),
            "subjects": ("subjects",),
            "userNames": ("userNames",),
            "groupNames": ("groupNames",),
        },
    )

    reg.register(
        K.ROUTE,
        openshift_versions("route"),
        {
            "host": ("spec", "host"),
            "path": ("spec", "path"),
            "to": ("spec", "to"),
            "tls": ("spec", "tls"),
        },
    )
    reg.register(
        K.TEMPLATE,
        openshift_versions("template"),
        {
            "objects": ("objects",),
            "parameters": ("parameters",),
            "objectLabels": ("labels",),
        },
    )
    reg.register(
        K.USER,
        openshift_versions("user"),
        {
            "fullName": ("fullName",),
            "identities": ("identities",),
            "groups": ("groups",),
        },
    )

    return reg


_default_registry: Optional[PropertyKeyRegistry] = None


def get_default_property_registry() -> PropertyKeyRegistry:
    global _default_registry

    if _default_registry is None:
        _default_registry = create_default_registry()

    return _default_registry
