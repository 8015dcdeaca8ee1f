import logging
from typing import Optional, Type, TypeVar

from aiohttp import ClientSession

from kuberest.discovery import discover
from kuberest.factory import ResourceFactory
from kuberest.registry import TypeRegistry
from kuberest.type_mapper import ApiTypeMapper

T = TypeVar("T")


class Client:
    """The handle every resource keeps a reference to.

    It carries the capabilities of a connection (currently the api type mapper)
    and hands them out through `adapt`. Transport lives elsewhere.
    """

    def __init__(
        self,
        *,
        server: Optional[str] = None,
        type_mapper: Optional[ApiTypeMapper] = None,
        registry: Optional[TypeRegistry] = None,
        logger=None,
    ) -> None:
        self.server = server
        self.type_mapper = type_mapper
        self.registry = registry
        self.logger = logger or logging.getLogger("client")

        self._resource_factory: Optional[ResourceFactory] = None  # lazy

    def __repr__(self) -> str:
        return "<%s server=%r, type_mapper=%r>" % (
            self.__class__.__name__,
            self.server,
            self.type_mapper,
        )

    def adapt(self, capability: Type[T]) -> Optional[T]:
        "Returns the capability of the given type if this client has one"

        for candidate in (self.type_mapper, self._resource_factory):
            if isinstance(candidate, capability):
                return candidate

        if isinstance(self, capability):
            return self  # type: ignore

        return None

    @property
    def resource_factory(self) -> ResourceFactory:
        if self._resource_factory is None:
            self._resource_factory = ResourceFactory(client=self, registry=self.registry)

        return self._resource_factory

    async def refresh_type_mapper(self, session: ClientSession, **kwargs) -> ApiTypeMapper:
        "Rebuilds the type mapper from what the server advertises"

        if not self.server:
            raise ValueError("Client has no server to discover")

        self.logger.info("Refreshing api type mapper from %s", self.server)
        self.type_mapper = await discover(session, self.server, **kwargs)
        return self.type_mapper
