import base64
from typing import Dict, List, Optional

from kuberest.model.object_model.base import KubernetesResource, field
from kuberest.model.object_model.status import PodStatus

# Kubernetes kinds


class Pod(KubernetesResource):
    phase = field("phase")
    podIP = field("podIP")
    hostIP = field("hostIP")
    nodeName = field("nodeName")
    restartPolicy = field("restartPolicy")

    @property
    def containers(self) -> List[Dict]:
        return self.get_property("containers") or []

    def get_container_names(self) -> List[str]:
        return [cont["name"] for cont in self.containers if "name" in cont]

    @property
    def status(self) -> Optional[PodStatus]:
        status = self._obj.get("status")
        if not status:
            return None

        return PodStatus(status)


class Service(KubernetesResource):
    clusterIP = field("clusterIP")
    type = field("type")
    selector = field("selector")

    @property
    def ports(self) -> List[Dict]:
        return self.get_property("ports") or []

    @property
    def port(self) -> Optional[int]:
        "The first exposed port"

        ports = self.ports
        return ports[0].get("port") if ports else None

    @property
    def targetPort(self) -> Optional[int]:
        ports = self.ports
        return ports[0].get("targetPort") if ports else None


class ReplicationController(KubernetesResource):
    replicas = field("replicas")
    selector = field("selector")
    template = field("template")
    currentReplicas = field("currentReplicas")


class Status(KubernetesResource):
    status = field("status")
    message = field("message")
    reason = field("reason")
    code = field("code")

    def is_failure(self) -> bool:
        return self.status == "Failure"


class ConfigMap(KubernetesResource):
    @property
    def data(self) -> Dict[str, str]:
        return dict(self.get_property("data") or {})

    def get_data(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set_data(self, key: str, value: str) -> None:
        data = self.data
        data[key] = value
        self.set_property("data", data)


class Secret(KubernetesResource):
    """Values under `data` are base64 on the wire, the accessors here deal in
    decoded bytes."""

    type = field("type")

    @property
    def data(self) -> Dict[str, str]:
        return dict(self.get_property("data") or {})

    def get_data(self, key: str) -> Optional[bytes]:
        value = self.data.get(key)
        if value is None:
            return None

        return base64.b64decode(value)

    def set_data(self, key: str, value: bytes) -> None:
        data = self.data
        data[key] = base64.b64encode(value).decode()
        self.set_property("data", data)


class ServiceAccount(KubernetesResource):
    @property
    def secrets(self) -> List[str]:
        return [ref["name"] for ref in self.get_property("secrets") or []]

    @property
    def imagePullSecrets(self) -> List[str]:
        return [ref["name"] for ref in self.get_property("imagePullSecrets") or []]


class KubernetesEvent(KubernetesResource):
    reason = field("reason")
    message = field("message")
    type = field("type")
    count = field("count")
    involvedObject = field("involvedObject")


class LimitRange(KubernetesResource):
    @property
    def limits(self) -> List[Dict]:
        return self.get_property("limits") or []


class ResourceQuota(KubernetesResource):
    @property
    def hard(self) -> Dict[str, str]:
        return dict(self.get_property("hard") or {})

    @property
    def used(self) -> Dict[str, str]:
        return dict(self.get_property("used") or {})


class Namespace(KubernetesResource):
    phase = field("phase")
    displayName = field("displayName")
    description = field("description")


class PersistentVolumeClaim(KubernetesResource):
    accessModes = field("accessModes")
    requestedStorage = field("requestedStorage")
    volumeName = field("volumeName")
    phase = field("phase")


class PersistentVolume(KubernetesResource):
    capacity = field("capacity")
    accessModes = field("accessModes")
    reclaimPolicy = field("reclaimPolicy")
    phase = field("phase")


# OpenShift kinds


class Build(KubernetesResource):
    phase = field("phase")
    message = field("message")
    outputTo = field("outputTo")


class BuildConfig(KubernetesResource):
    source = field("source")
    strategy = field("strategy")
    outputTo = field("outputTo")

    @property
    def triggers(self) -> List[Dict]:
        return self.get_property("triggers") or []


class BuildRequest(KubernetesResource):
    triggeredBy = field("triggeredBy")

    @property
    def env(self) -> List[Dict]:
        return self.get_property("env") or []

    def add_env(self, name: str, value: str) -> None:
        env = [var for var in self.env if var.get("name") != name]
        env.append({"name": name, "value": value})
        self.set_property("env", env)


class DeploymentConfig(ReplicationController):
    latestVersion = field("latestVersion")

    @property
    def triggers(self) -> List[Dict]:
        return self.get_property("triggers") or []


class ImageStream(KubernetesResource):
    dockerImageRepository = field("dockerImageRepository")

    @property
    def tags(self) -> List[Dict]:
        return self.get_property("tags") or []

    @property
    def statusTags(self) -> List[Dict]:
        return self.get_property("statusTags") or []


class ImageStreamImport(KubernetesResource):
    importImages = field("import")

    @property
    def images(self) -> List[Dict]:
        return self.get_property("images") or []

    @property
    def statusImages(self) -> List[Dict]:
        return self.get_property("statusImages") or []


class _OAuthToken(KubernetesResource):
    clientName = field("clientName")
    userName = field("userName")
    expiresIn = field("expiresIn")
    scopes = field("scopes")


class OAuthAccessToken(_OAuthToken):
    pass


class OAuthAuthorizeToken(_OAuthToken):
    pass


class OAuthClient(KubernetesResource):
    secret = field("secret")
    redirectURIs = field("redirectURIs")
    grantMethod = field("grantMethod")


class OAuthClientAuthorization(KubernetesResource):
    clientName = field("clientName")
    userName = field("userName")
    scopes = field("scopes")


class Project(Namespace):
    pass


class ProjectRequest(KubernetesResource):
    displayName = field("displayName")
    description = field("description")


class Policy(KubernetesResource):
    roles = field("roles")


class PolicyBinding(KubernetesResource):
    policyRef = field("policyRef")
    roleBindings = field("roleBindings")


class Role(KubernetesResource):
    @property
    def rules(self) -> List[Dict]:
        return self.get_property("rules") or []


class RoleBinding(KubernetesResource):
    roleRef = field("roleRef")
    userNames = field("userNames")
    groupNames = field("groupNames")

    @property
    def subjects(self) -> List[Dict]:
        return self.get_property("subjects") or []


class Route(KubernetesResource):
    host = field("host")
    path = field("path")
    tls = field("tls")

    @property
    def serviceName(self) -> Optional[str]:
        to = self.get_property("to") or {}
        return to.get("name")

    @serviceName.setter
    def serviceName(self, value: str) -> None:
        self.set_property("to", {"kind": "Service", "name": value})


class Template(KubernetesResource):
    objectLabels = field("objectLabels")

    @property
    def objects(self) -> List[Dict]:
        return self.get_property("objects") or []

    @property
    def parameters(self) -> List[Dict]:
        return self.get_property("parameters") or []

    def get_parameter(self, name: str) -> Optional[Dict]:
        for param in self.parameters:
            if param.get("name") == name:
                return param

        return None


class User(KubernetesResource):
    fullName = field("fullName")

    @property
    def identities(self) -> List[str]:
        return self.get_property("identities") or []

    @property
    def groups(self) -> List[str]:
        return self.get_property("groups") or []
