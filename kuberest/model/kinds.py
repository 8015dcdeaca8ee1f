LIST_SUFFIX = "List"


class ResourceKind:
    # OpenShift kinds
    BUILD = "Build"
    BUILD_CONFIG = "BuildConfig"
    BUILD_REQUEST = "BuildRequest"
    DEPLOYMENT_CONFIG = "DeploymentConfig"
    IMAGE_STREAM = "ImageStream"
    IMAGE_STREAM_IMPORT = "ImageStreamImport"
    LIST = "List"
    OAUTH_ACCESS_TOKEN = "OAuthAccessToken"
    OAUTH_AUTHORIZE_TOKEN = "OAuthAuthorizeToken"
    OAUTH_CLIENT = "OAuthClient"
    OAUTH_CLIENT_AUTHORIZATION = "OAuthClientAuthorization"
    POLICY = "Policy"
    POLICY_BINDING = "PolicyBinding"
    PROJECT = "Project"
    PROJECT_REQUEST = "ProjectRequest"
    ROLE = "Role"
    ROLE_BINDING = "RoleBinding"
    ROUTE = "Route"
    TEMPLATE = "Template"
    USER = "User"

    # Kubernetes kinds
    CONFIG_MAP = "ConfigMap"
    EVENT = "Event"
    LIMIT_RANGE = "LimitRange"
    NAMESPACE = "Namespace"
    PERSISTENT_VOLUME = "PersistentVolume"
    PVC = "PersistentVolumeClaim"
    POD = "Pod"
    REPLICATION_CONTROLLER = "ReplicationController"
    RESOURCE_QUOTA = "ResourceQuota"
    SECRET = "Secret"
    SERVICE = "Service"
    SERVICE_ACCOUNT = "ServiceAccount"
    STATUS = "Status"

    UNRECOGNIZED = "Unrecognized"


def is_list_kind(kind: str) -> bool:
    return kind.endswith(LIST_SUFFIX)


def list_kind_of(kind: str) -> str:
    "Pod -> PodList"
    return f"{kind}{LIST_SUFFIX}"


def item_kind_of(kind: str) -> str:
    "PodList -> Pod"
    if is_list_kind(kind):
        return kind[: -len(LIST_SUFFIX)]

    return kind
