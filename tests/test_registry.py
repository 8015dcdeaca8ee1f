"""Tests for registry.py module."""

import pytest

from kuberest.model.api_group import API_GROUPS, KUBE_API, OS_API, ApiGroup, CoreV1, OpenShiftV1
from kuberest.model.api_resource import ApiResource
from kuberest.model.kinds import ResourceKind
from kuberest.model.object_model.base import KubernetesResource
from kuberest.model.object_model.collection import ResourceList
from kuberest.model.object_model.kinds import Pod, Service
from kuberest.registry import (
    BUILTIN_TYPES,
    TypeRegistry,
    create_registry,
    derive_type_name,
    get_default_registry,
)


class Widget(KubernetesResource):
    pass


def endpoint(group: ApiGroup, kind: str) -> ApiResource:
    return ApiResource(group=group, kind=kind, name=kind.lower() + "s", namespaced=True)


class TestTypeRegistry:
    """Tests for registering and looking up kinds."""

    def test_lookup_registered(self):
        registry = TypeRegistry()
        registry.register("Pod", Pod)

        assert registry.lookup("Pod") is Pod
        assert "Pod" in registry

    def test_lookup_unknown_is_absent(self):
        registry = TypeRegistry()

        assert registry.lookup("FooBar") is None
        assert "FooBar" not in registry

    def test_kind_registered_once(self):
        registry = TypeRegistry()
        registry.register("Pod", Pod)

        with pytest.raises(ValueError):
            registry.register("Pod", Service)

        assert registry.lookup("Pod") is Pod

    def test_frozen_registry_rejects_registration(self):
        registry = TypeRegistry()
        registry.freeze()

        with pytest.raises(RuntimeError):
            registry.register("Pod", Pod)

        with pytest.raises(RuntimeError):
            registry.register_extension("apis", "apps", "Deployment", Widget)

    def test_fallback(self):
        assert TypeRegistry().fallback is KubernetesResource

    def test_extension_registered_once(self):
        registry = TypeRegistry()
        registry.register_extension("apis", "widgets.example.com", "Widget", Widget)

        with pytest.raises(ValueError):
            registry.register_extension("apis", "widgets.example.com/v1", "Widget", Widget)

    def test_extension_lookup(self):
        registry = TypeRegistry()
        registry.register_extension("apis", "widgets.example.com", "Widget", Widget)

        assert registry.lookup_extension("apis.widgets.example.com.Widget") is Widget
        assert registry.lookup_extension("apis.other.Widget") is None


class TestDefaultRegistry:
    """Tests for the registry of built-in kinds."""

    def test_builtin_kinds(self):
        registry = create_registry()

        assert registry.kinds() == sorted(BUILTIN_TYPES)
        assert registry.lookup(ResourceKind.POD) is Pod
        assert registry.lookup(ResourceKind.LIST) is ResourceList
        assert registry.lookup(ResourceKind.UNRECOGNIZED) is None

    def test_created_frozen(self):
        assert create_registry().frozen
        assert not create_registry(freeze=False).frozen

    def test_default_is_shared(self):
        assert get_default_registry() is get_default_registry()
        assert get_default_registry().frozen


class TestDeriveTypeName:
    """Tests for naming extension types after their endpoint."""

    def test_core_kind(self):
        assert derive_type_name(endpoint(CoreV1, "Pod")) == f"{KUBE_API}.Pod"

    def test_legacy_openshift_kind(self):
        assert derive_type_name(endpoint(OpenShiftV1, "Route")) == f"{OS_API}.Route"

    def test_group_kind(self):
        apps = ApiGroup(name="apps", prefix=API_GROUPS, version="v1")

        assert derive_type_name(endpoint(apps, "Deployment")) == "apis.apps.Deployment"

    def test_matches_registration(self):
        registry = TypeRegistry()
        registry.register_extension(KUBE_API, "ignored", "Binding", Widget)

        assert registry.lookup_extension(derive_type_name(endpoint(CoreV1, "Binding"))) is Widget
