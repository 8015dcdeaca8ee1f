"""Tests for the resource classes in model/object_model."""

import json
from datetime import datetime, timezone

import pytest

from kuberest.model.object_model.base import KubernetesResource
from kuberest.model.object_model.kinds import (
    BuildRequest,
    ConfigMap,
    DeploymentConfig,
    Pod,
    Project,
    Route,
    Secret,
    Service,
    ServiceAccount,
    Status,
    Template,
)


class TestKubernetesResource:
    """Tests for the capabilities every resource has."""

    def test_identity(self, factory, pod_json):
        pod = factory.create(pod_json)

        assert pod.uid == "5d3a7c1e-0000-4000-8000-000000000001"
        assert pod.resourceVersion == "3141"
        assert pod.creationTimestamp == datetime(2024, 3, 1, 10, 20, 30, tzinfo=timezone.utc)

    def test_missing_fields_read_as_none(self, factory):
        pod = factory.create_empty("v1", "Pod")

        assert pod.name is None
        assert pod.namespace is None
        assert pod.creationTimestamp is None
        assert pod.labels == {}
        assert pod.document == {"apiVersion": "v1", "kind": "Pod"}

    def test_setters_write_through(self, factory, pod_json):
        pod = factory.create(pod_json)

        pod.name = "web-9"
        pod.namespace = "other"

        assert pod.document["metadata"]["name"] == "web-9"
        assert json.loads(pod.to_json())["metadata"]["namespace"] == "other"

    def test_clearing_namespace(self, factory, pod_json):
        pod = factory.create(pod_json)

        pod.namespace = ""

        assert "namespace" not in pod.document["metadata"]

    def test_labels(self, factory, pod_json):
        pod = factory.create(pod_json)

        pod.add_label("tier", "front")

        assert pod.labels == {"app": "web", "tier": "front"}

    def test_labels_are_copies(self, factory, pod_json):
        pod = factory.create(pod_json)

        pod.labels["sneaky"] = "yes"

        assert "sneaky" not in pod.labels

    def test_annotations(self, factory):
        service = factory.create_empty("v1", "Service", "db")

        assert not service.is_annotated("owner")
        service.set_annotation("owner", "team-a")

        assert service.get_annotation("owner") == "team-a"
        assert service.document["metadata"]["annotations"] == {"owner": "team-a"}

    def test_unknown_property(self, factory):
        pod = factory.create_empty("v1", "Pod")

        assert not pod.has_property("bogus")
        with pytest.raises(KeyError):
            pod.get_property("bogus")

    def test_generic_resource(self, factory):
        dct = {"kind": "Gadget", "apiVersion": "v1", "metadata": {"name": "g"}, "spec": {"x": 1}}

        gadget = factory.create(json.dumps(dct))

        assert type(gadget) is KubernetesResource
        assert gadget.name == "g"
        assert gadget.document["spec"] == {"x": 1}

    def test_repr(self, factory):
        pod = factory.stub("Pod", "my-pod", "my-ns")

        assert repr(pod) == "<Pod apiVersion='v1', kind='Pod', namespace='my-ns', name='my-pod'>"


class TestPod:
    """Tests for Pod accessors."""

    def test_fields(self, factory, pod_json):
        pod = factory.create(pod_json)

        assert pod.phase == "Running"
        assert pod.podIP == "10.1.2.3"
        assert pod.hostIP == "192.168.0.10"
        assert pod.nodeName == "node-a"
        assert pod.get_container_names() == ["web"]

    def test_status(self, factory, pod_json):
        status = factory.create(pod_json).status

        assert status.phase == "Running"
        assert status.is_ready()

        cont = status.containerStatuses[0]
        assert cont.restartCount == 1
        assert cont.state.key == "running"
        assert cont.lastState.key == "terminated"
        assert cont.lastState.exitCode == 137
        assert cont.lastState.reason == "OOMKilled"

    def test_no_status(self, factory):
        pod = factory.stub("Pod", "p")

        assert pod.status is None
        assert isinstance(pod, Pod)


class TestOtherKinds:
    """Tests for the accessors of the remaining kinds."""

    def test_service(self, factory):
        dct = {
            "kind": "Service",
            "apiVersion": "v1",
            "spec": {"ports": [{"port": 80, "targetPort": 8080}], "selector": {"app": "web"}},
        }

        service = factory.create(json.dumps(dct))

        assert isinstance(service, Service)
        assert service.port == 80
        assert service.targetPort == 8080
        assert service.selector == {"app": "web"}

    def test_service_without_ports(self, factory):
        service = factory.create_empty("v1", "Service")

        assert service.port is None
        assert service.ports == []

    def test_status(self, factory):
        dct = {"kind": "Status", "apiVersion": "v1", "status": "Failure", "code": 404, "reason": "NotFound"}

        status = factory.create(json.dumps(dct))

        assert isinstance(status, Status)
        assert status.is_failure()
        assert status.code == 404

    def test_config_map(self, factory):
        cm = factory.create_empty("v1", "ConfigMap", "settings")
        cm.set_data("mode", "fast")

        assert isinstance(cm, ConfigMap)
        assert cm.get_data("mode") == "fast"
        assert cm.document["data"] == {"mode": "fast"}

    def test_secret(self, factory):
        secret = factory.create_empty("v1", "Secret", "creds")
        secret.set_data("password", b"hunter2")

        assert isinstance(secret, Secret)
        assert secret.document["data"]["password"] == "aHVudGVyMg=="
        assert secret.get_data("password") == b"hunter2"
        assert secret.get_data("missing") is None

    def test_service_account(self, factory):
        dct = {
            "kind": "ServiceAccount",
            "apiVersion": "v1",
            "secrets": [{"name": "token-a"}],
            "imagePullSecrets": [{"name": "pull-a"}],
        }

        sa = factory.create(json.dumps(dct))

        assert isinstance(sa, ServiceAccount)
        assert sa.secrets == ["token-a"]
        assert sa.imagePullSecrets == ["pull-a"]

    def test_deployment_config(self, factory):
        dc = factory.create_empty("apps.openshift.io/v1", "DeploymentConfig", "web")
        dc.replicas = 3

        assert isinstance(dc, DeploymentConfig)
        assert dc.document["spec"]["replicas"] == 3
        assert dc.triggers == []

    def test_route(self, factory):
        route = factory.create_empty("route.openshift.io/v1", "Route", "web")
        route.host = "web.example.com"
        route.serviceName = "web"

        assert isinstance(route, Route)
        assert route.document["spec"] == {
            "host": "web.example.com",
            "to": {"kind": "Service", "name": "web"},
        }
        assert route.serviceName == "web"

    def test_project(self, factory):
        dct = {
            "kind": "Project",
            "apiVersion": "project.openshift.io/v1",
            "metadata": {"name": "shop", "annotations": {"openshift.io/display-name": "Shop"}},
        }

        project = factory.create(json.dumps(dct))

        assert isinstance(project, Project)
        assert project.displayName == "Shop"

    def test_build_request_env(self, factory):
        request = factory.create_empty("build.openshift.io/v1", "BuildRequest", "web")
        request.add_env("DEBUG", "0")
        request.add_env("DEBUG", "1")

        assert isinstance(request, BuildRequest)
        assert request.env == [{"name": "DEBUG", "value": "1"}]

    def test_template_parameters(self, factory):
        dct = {
            "kind": "Template",
            "apiVersion": "template.openshift.io/v1",
            "parameters": [{"name": "REPLICAS", "value": "2"}],
            "objects": [{"kind": "Service"}],
        }

        template = factory.create(json.dumps(dct))

        assert isinstance(template, Template)
        assert template.get_parameter("REPLICAS") == {"name": "REPLICAS", "value": "2"}
        assert template.get_parameter("NOPE") is None
        assert len(template.objects) == 1
