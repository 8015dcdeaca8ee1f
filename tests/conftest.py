"""Shared test fixtures for kuberest tests."""

import json

import pytest
from api_fixtures import AppsV1, AppsV1beta1, RouteV1, WidgetsV1, make_resource

from kuberest.client import Client
from kuberest.factory import ResourceFactory
from kuberest.model.api_group import CoreV1, OpenShiftV1
from kuberest.registry import create_registry
from kuberest.tools.logs import get_silent_logger
from kuberest.type_mapper import ApiTypeMapper


@pytest.fixture
def type_mapper():
    """A mapper resembling what discovery finds on an OpenShift cluster."""
    return ApiTypeMapper(
        [
            make_resource(CoreV1, "Pod", "pods"),
            make_resource(CoreV1, "Service", "services"),
            make_resource(CoreV1, "Namespace", "namespaces", namespaced=False),
            make_resource(OpenShiftV1, "Route", "routes"),
            make_resource(AppsV1beta1, "Deployment", "deployments"),
            make_resource(AppsV1, "Deployment", "deployments"),
            make_resource(RouteV1, "Route", "routes"),
            make_resource(WidgetsV1, "Widget", "widgets"),
        ],
        logger=get_silent_logger(),
    )


@pytest.fixture
def registry():
    """An unfrozen registry with the built-in kinds, ready for extensions."""
    return create_registry(freeze=False)


@pytest.fixture
def client(type_mapper, registry):
    return Client(server="https://kube.example.com", type_mapper=type_mapper, registry=registry)


@pytest.fixture
def factory(client):
    return client.resource_factory


@pytest.fixture
def bare_factory():
    """A factory without a client, so only the registry and fallback apply."""
    return ResourceFactory(logger=get_silent_logger())


@pytest.fixture
def pod_dict():
    return {
        "kind": "Pod",
        "apiVersion": "v1",
        "metadata": {
            "name": "web-1",
            "namespace": "shop",
            "uid": "5d3a7c1e-0000-4000-8000-000000000001",
            "resourceVersion": "3141",
            "creationTimestamp": "2024-03-01T10:20:30Z",
            "labels": {"app": "web"},
        },
        "spec": {
            "nodeName": "node-a",
            "containers": [{"name": "web", "image": "nginx:1.25"}],
        },
        "status": {
            "phase": "Running",
            "podIP": "10.1.2.3",
            "hostIP": "192.168.0.10",
            "startTime": "2024-03-01T10:20:35Z",
            "containerStatuses": [
                {
                    "name": "web",
                    "ready": True,
                    "restartCount": 1,
                    "image": "nginx:1.25",
                    "state": {"running": {"startedAt": "2024-03-01T10:20:40Z"}},
                    "lastState": {
                        "terminated": {
                            "exitCode": 137,
                            "reason": "OOMKilled",
                            "startedAt": "2024-03-01T10:00:00Z",
                            "finishedAt": "2024-03-01T10:20:00Z",
                        }
                    },
                }
            ],
        },
    }


@pytest.fixture
def pod_json(pod_dict):
    return json.dumps(pod_dict)


@pytest.fixture
def pod_list_json():
    return json.dumps(
        {
            "kind": "PodList",
            "apiVersion": "v1",
            "metadata": {"resourceVersion": "9000"},
            "items": [
                {"metadata": {"name": "web-1", "namespace": "shop"}},
                {"metadata": {"name": "web-2", "namespace": "shop"}},
                {"metadata": {"name": "db-1", "namespace": "shop"}},
            ],
        }
    )
