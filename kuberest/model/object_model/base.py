from datetime import datetime
from typing import Any, Dict, Optional

from kuberest.model.document import (
    APIVERSION,
    KIND,
    RawObject,
    delete_path,
    dump_document,
    get_path,
    set_path,
)
from kuberest.model.object_model.helpers import maybe_parse_date
from kuberest.model.properties import PropertyKeys


def field(key: str) -> property:
    "A read/write attribute backed by the property key `key`"

    def getter(self: "KubernetesResource") -> Any:
        return self.get_property(key)

    def setter(self: "KubernetesResource", value: Any) -> None:
        self.set_property(key, value)

    return property(getter, setter)


class KubernetesResource:
    """Wraps a wire document in place. Every read goes to the document and
    every write lands in it, so serializing the document always gives the
    current state of the object.

    This is also the type used for kinds nobody registered a class for.
    """

    def __init__(self, obj: RawObject, client: Any, property_keys: PropertyKeys) -> None:
        self._obj = obj
        self.client = client
        self.property_keys = property_keys

    def __repr__(self) -> str:
        return "<%s apiVersion=%r, kind=%r, namespace=%r, name=%r>" % (
            self.__class__.__name__,
            self.apiVersion,
            self.kind,
            self.namespace,
            self.name,
        )

    @property
    def document(self) -> RawObject:
        return self._obj

    def to_json(self) -> str:
        return dump_document(self._obj)

    # Property keys

    def get_path_for(self, key: str):
        path = self.property_keys.get(key)
        if path is None:
            raise KeyError("No property %r known for kind %s" % (key, self.kind))

        return path

    def has_property(self, key: str) -> bool:
        return key in self.property_keys

    def get_property(self, key: str) -> Optional[Any]:
        return get_path(self._obj, self.get_path_for(key))

    def set_property(self, key: str, value: Any) -> None:
        path = self.get_path_for(key)

        if value is None:
            delete_path(self._obj, path)
        else:
            set_path(self._obj, path, value)

    # Common capabilities

    @property
    def kind(self) -> Optional[str]:
        return self._obj.get(KIND)

    @property
    def apiVersion(self) -> Optional[str]:
        return self._obj.get(APIVERSION)

    @property
    def name(self) -> Optional[str]:
        return self.get_property("name")

    @name.setter
    def name(self, value: str) -> None:
        self.set_property("name", value)

    @property
    def namespace(self) -> Optional[str]:
        return self.get_property("namespace")

    @namespace.setter
    def namespace(self, value: Optional[str]) -> None:
        # an empty namespace means no namespace, never an empty string
        self.set_property("namespace", value or None)

    @property
    def uid(self) -> Optional[str]:
        return self.get_property("uid")

    @property
    def resourceVersion(self) -> Optional[str]:
        return self.get_property("resourceVersion")

    @property
    def creationTimestamp(self) -> Optional[datetime]:
        return maybe_parse_date(self.get_property("creationTimestamp"))

    @property
    def labels(self) -> Dict[str, str]:
        return dict(self.get_property("labels") or {})

    def add_label(self, key: str, value: str) -> None:
        labels = self.labels
        labels[key] = value
        self.set_property("labels", labels)

    @property
    def annotations(self) -> Dict[str, str]:
        return dict(self.get_property("annotations") or {})

    def get_annotation(self, key: str) -> Optional[str]:
        return self.annotations.get(key)

    def set_annotation(self, key: str, value: str) -> None:
        annotations = self.annotations
        annotations[key] = value
        self.set_property("annotations", annotations)

    def is_annotated(self, key: str) -> bool:
        return key in self.annotations
