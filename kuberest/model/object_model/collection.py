from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from kuberest.model.document import KIND, RawObject
from kuberest.model.kinds import item_kind_of
from kuberest.model.object_model.base import KubernetesResource
from kuberest.model.properties import PropertyKeys

if TYPE_CHECKING:
    from kuberest.factory import ResourceFactory


class ResourceList(KubernetesResource):
    """A list kind (PodList, List, ...). The items are materialized when the
    list is constructed, each one dispatched through the factory with its own
    kind and the version of the list.

    Items without a kind of their own get the singular form of the list kind,
    which is how the server sends them for typed lists.
    """

    def __init__(
        self,
        obj: RawObject,
        client: Any,
        property_keys: PropertyKeys,
        *,
        factory: Optional["ResourceFactory"] = None,
    ) -> None:
        super().__init__(obj, client, property_keys)

        if factory is None:
            if client is None:
                raise ValueError("A list needs a factory or a client to build its items")
            factory = client.resource_factory

        self._items: List[KubernetesResource] = self._build_items(factory)

    def __repr__(self) -> str:
        return "<%s apiVersion=%r, kind=%r, items=%r>" % (
            self.__class__.__name__,
            self.apiVersion,
            self.kind,
            len(self._items),
        )

    def _build_items(self, factory: "ResourceFactory") -> List[KubernetesResource]:
        raw_items = self.get_property("items") or []
        default_kind = item_kind_of(self.kind)

        items = []
        for item in raw_items:
            if not isinstance(item, dict):
                raise TypeError("List item is not an object: %r" % (item,))

            kind = item.get(KIND) or default_kind
            if not kind:
                raise TypeError("List item has no kind: %r" % (item,))

            items.append(factory.create_from_document(item, self.apiVersion, kind))

        return items

    def __iter__(self) -> Iterator[KubernetesResource]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> KubernetesResource:
        return self._items[index]

    @property
    def items(self) -> List[KubernetesResource]:
        return list(self._items)

    def get_items(self, kind: Optional[str] = None) -> List[KubernetesResource]:
        if kind is None:
            return self.items

        return [item for item in self._items if item.kind == kind]
