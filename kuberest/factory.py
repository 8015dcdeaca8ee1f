import logging
from typing import IO, Any, List, Optional, Union

from kuberest.exceptions import (
    ContainerKindMismatchError,
    MalformedInputError,
    ResourceCreationError,
    ResourceFactoryError,
    UnknownKindError,
    UnsupportedVersionError,
)
from kuberest.model.api_group import FWD_SLASH
from kuberest.model.document import (
    APIVERSION,
    KIND,
    RawObject,
    new_document,
    parse_document,
    stamp_document,
)
from kuberest.model.kinds import is_list_kind, list_kind_of
from kuberest.model.object_model.base import KubernetesResource
from kuberest.model.object_model.collection import ResourceList
from kuberest.model.properties import PropertyKeyRegistry, get_default_property_registry
from kuberest.registry import (
    ResourceType,
    TypeRegistry,
    derive_type_name,
    get_default_registry,
)
from kuberest.tools.logs import CtxLogger
from kuberest.type_mapper import ApiTypeMapper

Input = Union[str, bytes]


class ResourceFactory:
    """Turns wire documents, or a version and kind, into resource objects.

    The class for a kind is resolved in three steps:

    1. the type registry, which holds every kind shipped with the client
    2. the extension table of the registry, under the name derived from the
       endpoint the api type mapper reports for the kind
    3. the generic KubernetesResource

    Kinds ending in "List" always become a ResourceList whose items go through
    the same resolution.

    The client reference can be swapped with `set_client`. This is not
    synchronized, don't swap it while other threads are creating resources.
    """

    def __init__(
        self,
        client: Any = None,
        *,
        registry: Optional[TypeRegistry] = None,
        properties: Optional[PropertyKeyRegistry] = None,
        logger=None,
    ) -> None:
        self.client = client
        self.registry = registry or get_default_registry()
        self.properties = properties or get_default_property_registry()
        self.logger = logger or logging.getLogger("resource-factory")

    def __repr__(self) -> str:
        return "<%s client=%r, registry=%r>" % (
            self.__class__.__name__,
            self.client,
            self.registry,
        )

    def set_client(self, client: Any) -> None:
        self.client = client

    # Logging

    def get_ctx_logger(self, version: str, kind: str) -> CtxLogger:
        return CtxLogger(
            logger=self.logger,
            extra={"version": version, "kind": kind},
            prefix="[%(version)s/%(kind)s] ",
        )

    # Parsing

    def parse(self, text: Input) -> RawObject:
        try:
            return parse_document(text)
        except (ValueError, TypeError) as exc:
            raise MalformedInputError(text, "Unable to parse resource document") from exc

    def read_identity(self, text: Input, dct: RawObject, field: str) -> str:
        value = dct.get(field)
        if not isinstance(value, str) or not value:
            raise MalformedInputError(text, "Resource document has no %s" % field)

        return value

    # Creating

    def create(self, text: Input) -> KubernetesResource:
        """Creates a resource from the json text of a single resource or of a
        list. Raises MalformedInputError if the text is not a json object with
        a kind and apiVersion."""

        dct = self.parse(text)
        version = self.read_identity(text, dct, APIVERSION)
        kind = self.read_identity(text, dct, KIND)

        return self.create_from_document(dct, version, kind)

    def create_instance_from(self, text: Input) -> KubernetesResource:
        return self.create(text)

    def create_from_stream(self, stream: IO) -> KubernetesResource:
        try:
            data = stream.read()
        except (OSError, ValueError) as exc:
            raise MalformedInputError(
                stream, "Unable to read the resource from the stream"
            ) from exc

        return self.create(data)

    def create_empty(self, version: str, kind: str, name: Optional[str] = None) -> KubernetesResource:
        "Creates a resource to send to the server rather than one received from it"

        resource = self.create_from_document(new_document(), version, kind)

        if name:
            resource.name = name

        return resource

    def create_list(self, text: Input, kind: str) -> List[KubernetesResource]:
        """Creates the items of a `<kind>List` document, every item as `kind`.
        Raises ContainerKindMismatchError if the document is a list of
        something else."""

        dct = self.parse(text)

        list_kind = dct.get(KIND)
        if list_kind != list_kind_of(kind):
            raise ContainerKindMismatchError(expected=kind, actual=list_kind)

        version = self.read_identity(text, dct, APIVERSION)
        items = dct.get("items") or []

        return [self.create_from_document(item, version, kind) for item in items]

    def create_from_document(self, dct: RawObject, version: str, kind: str) -> KubernetesResource:
        """Wraps `dct` in the resource class resolved for `kind`. The document
        is stamped with `version` and `kind` first, whatever it said before.

        UnsupportedVersionError propagates as is, every other failure is
        raised as ResourceCreationError.
        """

        log = self.get_ctx_logger(version, kind)

        try:
            stamp_document(dct, version=version, kind=kind)
            property_keys = self.properties.get(version, kind)

            if is_list_kind(kind):
                log.debug("Creating list")
                return ResourceList(dct, self.client, property_keys, factory=self)

            cls = self.resolve_type(version, kind)
            if cls is None:
                cls = self.registry.fallback
                log.info("No type known for kind, using %s", cls.__name__)

            return cls(dct, self.client, property_keys)

        except (UnsupportedVersionError, ResourceCreationError):
            raise

        except Exception as exc:
            log.debug("Failed to create resource: %r", exc)
            raise ResourceCreationError(version=version, kind=kind, document=dct) from exc

    # Resolving

    def get_type_mapper(self) -> Optional[ApiTypeMapper]:
        if self.client is None:
            return None

        return self.client.adapt(ApiTypeMapper)

    def resolve_type(self, version: str, kind: str) -> Optional[ResourceType]:
        "Returns the class for kind, or None if only the fallback applies"

        log = self.get_ctx_logger(version, kind)

        cls = self.registry.lookup(kind)
        if cls is not None:
            return cls

        mapper = self.get_type_mapper()
        if mapper is None:
            log.debug("No api type mapper available")
            return None

        endpoint = mapper.get_endpoint_for(version, kind)
        if endpoint is None:
            log.debug("Api type mapper knows no endpoint")
            return None

        type_name = derive_type_name(endpoint)
        cls = self.registry.lookup_extension(type_name)
        if cls is None:
            log.debug("No extension type registered as %r", type_name)
            return None

        log.debug("Resolved extension type %r to %s", type_name, cls.__name__)
        return cls

    # Stubs

    def stub(self, kind: str, name: str, namespace: Optional[str] = None) -> KubernetesResource:
        """Creates an empty resource of `kind` carrying only its name and
        namespace, under the version the server currently prefers for it.

        Raises UnknownKindError if the server does not serve `kind` at all.
        """

        if not name:
            raise ResourceFactoryError("A %s stub needs a name" % kind)

        mapper = self.get_type_mapper()
        endpoint = mapper.get_endpoint_for("", kind) if mapper is not None else None
        if endpoint is None:
            raise UnknownKindError(kind)

        version = endpoint.version
        if endpoint.api_group_name:
            group = endpoint.api_group_name.split(FWD_SLASH)[0]
            version = f"{group}{FWD_SLASH}{endpoint.version}"

        resource = self.create_empty(version, kind)
        resource.name = name

        if namespace:
            resource.namespace = namespace

        return resource
