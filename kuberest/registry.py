from typing import Dict, List, Optional, Type

from kuberest.model.api_group import FWD_SLASH, LEGACY_PREFIXES
from kuberest.model.api_resource import ApiResource
from kuberest.model.kinds import ResourceKind as K
from kuberest.model.object_model import kinds as models
from kuberest.model.object_model.base import KubernetesResource
from kuberest.model.object_model.collection import ResourceList

ResourceType = Type[KubernetesResource]


def derive_type_name(endpoint: ApiResource) -> str:
    """The name under which an extension type for an endpoint is registered.

    Kinds under the legacy roots get no group: "api.Pod", "oapi.Route". Group
    kinds use the group part of the api group name: "apis.apps.Deployment".
    """

    extension = ""
    if endpoint.prefix not in LEGACY_PREFIXES:
        extension = endpoint.api_group_name.split(FWD_SLASH)[0]

    parts = [endpoint.prefix, extension, endpoint.kind]
    return ".".join(part for part in parts if part)


class TypeRegistry:
    """Maps kinds to the classes that model them.

    Kinds shipped with the client are registered by kind alone, they have the
    same shape under every version. Types for kinds only known after discovery
    (aggregated apis, extensions) go in the extension table, keyed by the name
    derived from their endpoint.
    """

    def __init__(self, fallback: ResourceType = KubernetesResource) -> None:
        self.fallback = fallback

        self._kinds: Dict[str, ResourceType] = {}
        self._extensions: Dict[str, ResourceType] = {}
        self._frozen = False

    def __repr__(self) -> str:
        return "<%s kinds=%r, extensions=%r, frozen=%r>" % (
            self.__class__.__name__,
            len(self._kinds),
            len(self._extensions),
            self._frozen,
        )

    def __contains__(self, kind: str) -> bool:
        return kind in self._kinds

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("Type registry is frozen")

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, kind: str, cls: ResourceType) -> None:
        self._check_writable()

        if kind in self._kinds:
            raise ValueError(
                "Kind %r is already registered to %s"
                % (kind, self._kinds[kind].__name__)
            )

        self._kinds[kind] = cls

    def lookup(self, kind: str) -> Optional[ResourceType]:
        return self._kinds.get(kind)

    def kinds(self) -> List[str]:
        return sorted(self._kinds.keys())

    def register_extension(self, prefix: str, group: str, kind: str, cls: ResourceType) -> None:
        self._check_writable()

        extension = "" if prefix in LEGACY_PREFIXES else group.split(FWD_SLASH)[0]
        type_name = ".".join(part for part in (prefix, extension, kind) if part)
        if type_name in self._extensions:
            raise ValueError("Extension type %r is already registered" % type_name)

        self._extensions[type_name] = cls

    def lookup_extension(self, type_name: str) -> Optional[ResourceType]:
        return self._extensions.get(type_name)


BUILTIN_TYPES: Dict[str, ResourceType] = {
    # OpenShift kinds
    K.BUILD: models.Build,
    K.BUILD_CONFIG: models.BuildConfig,
    K.BUILD_REQUEST: models.BuildRequest,
    K.DEPLOYMENT_CONFIG: models.DeploymentConfig,
    K.IMAGE_STREAM: models.ImageStream,
    K.IMAGE_STREAM_IMPORT: models.ImageStreamImport,
    K.LIST: ResourceList,
    K.NAMESPACE: models.Namespace,
    K.OAUTH_ACCESS_TOKEN: models.OAuthAccessToken,
    K.OAUTH_AUTHORIZE_TOKEN: models.OAuthAuthorizeToken,
    K.OAUTH_CLIENT: models.OAuthClient,
    K.OAUTH_CLIENT_AUTHORIZATION: models.OAuthClientAuthorization,
    K.PROJECT: models.Project,
    K.PROJECT_REQUEST: models.ProjectRequest,
    K.POLICY: models.Policy,
    K.POLICY_BINDING: models.PolicyBinding,
    K.ROLE: models.Role,
    K.ROLE_BINDING: models.RoleBinding,
    K.ROUTE: models.Route,
    K.TEMPLATE: models.Template,
    K.USER: models.User,
    # Kubernetes kinds
    K.EVENT: models.KubernetesEvent,
    K.LIMIT_RANGE: models.LimitRange,
    K.POD: models.Pod,
    K.PVC: models.PersistentVolumeClaim,
    K.PERSISTENT_VOLUME: models.PersistentVolume,
    K.RESOURCE_QUOTA: models.ResourceQuota,
    K.REPLICATION_CONTROLLER: models.ReplicationController,
    K.STATUS: models.Status,
    K.SERVICE: models.Service,
    K.SECRET: models.Secret,
    K.SERVICE_ACCOUNT: models.ServiceAccount,
    K.CONFIG_MAP: models.ConfigMap,
}


def create_registry(freeze: bool = True) -> TypeRegistry:
    registry = TypeRegistry(fallback=KubernetesResource)

    for kind, cls in BUILTIN_TYPES.items():
        registry.register(kind, cls)

    if freeze:
        registry.freeze()

    return registry


_default_registry: Optional[TypeRegistry] = None


def get_default_registry() -> TypeRegistry:
    global _default_registry

    if _default_registry is None:
        _default_registry = create_registry()

    return _default_registry
