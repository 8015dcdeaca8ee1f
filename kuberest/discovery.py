import asyncio
import logging
from typing import Any, Dict, List

from aiohttp import ClientSession
from aiohttp.client import ClientTimeout

from kuberest.exceptions import ApiError
from kuberest.model.api_group import API_GROUPS, KUBE_API, OS_API, ApiGroup
from kuberest.model.api_resource import ApiResource
from kuberest.type_mapper import ApiTypeMapper

logger = logging.getLogger("discovery")

Json = Dict[str, Any]


def raise_for_status(js: Json) -> None:
    if js.get("kind") == "Status" and js.get("status") == "Failure":
        raise ApiError(
            code=js.get("code"),
            reason=js.get("reason"),
            message=js.get("message"),
        )


def parse_api_versions(prefix: str, js: Json) -> List[ApiGroup]:
    """Parses the legacy root (/api or /oapi):

    {"kind": "APIVersions", "versions": ["v1"]}
    """

    raise_for_status(js)

    return [
        ApiGroup(name="", prefix=prefix, version=version, preferred=(i == 0))
        for i, version in enumerate(js.get("versions") or [])
    ]


def parse_api_groups(js: Json) -> List[ApiGroup]:
    raise_for_status(js)

    api_groups = []
    for item in js.get("groups") or []:
        name = item["name"]
        preferred = (item.get("preferredVersion") or {}).get("version")

        for version_dct in item["versions"]:
            version = version_dct["version"]

            api_group = ApiGroup(
                name=name,
                prefix=API_GROUPS,
                version=version,
                preferred=(preferred is None or version == preferred),
            )
            api_groups.append(api_group)

    return api_groups


def parse_api_resources(group: ApiGroup, js: Json) -> List[ApiResource]:
    raise_for_status(js)

    api_resources = []
    for item in js.get("resources") or []:
        name = item["name"]

        # subresources like pods/log are not kinds of their own
        if "/" in name:
            continue

        api_resource = ApiResource(
            group=group,
            kind=item["kind"],
            name=name,
            namespaced=item.get("namespaced", False),
            verbs=item.get("verbs"),
        )
        api_resources.append(api_resource)

    return api_resources


async def fetch_json(session: ClientSession, url: str, **kwargs) -> Json:
    kwargs.setdefault("timeout", ClientTimeout(sock_connect=3, total=15))

    async with session.get(url, allow_redirects=True, **kwargs) as response:
        logger.debug("Parsing response from %s as json", url)
        js = await response.json(content_type=None)

        # may raise
        raise_for_status(js)
        return js


async def discover(session: ClientSession, server: str, **kwargs) -> ApiTypeMapper:
    """Reads the discovery documents from `server` and returns a populated
    type mapper. Extra kwargs (ssl, auth, timeout) go to every request.

    The /oapi root is optional, servers without OpenShift answer it with 404.
    """

    groups: List[ApiGroup] = []

    logger.info("Listing api versions on %s", server)
    js = await fetch_json(session, f"{server}/{KUBE_API}", **kwargs)
    groups.extend(parse_api_versions(KUBE_API, js))

    try:
        js = await fetch_json(session, f"{server}/{OS_API}", **kwargs)
        groups.extend(parse_api_versions(OS_API, js))
    except ApiError as exc:
        if not exc.is_not_found():
            raise
        logger.debug("Server does not serve /%s", OS_API)

    logger.info("Listing api groups on %s", server)
    js = await fetch_json(session, f"{server}/{API_GROUPS}", **kwargs)
    groups.extend(parse_api_groups(js))

    async def list_resources(group: ApiGroup) -> List[ApiResource]:
        logger.debug("Listing %s api resources", group.endpoint)
        js = await fetch_json(session, f"{server}{group.endpoint}", **kwargs)
        return parse_api_resources(group, js)

    coros = [list_resources(group) for group in groups]
    resource_lists = await asyncio.gather(*coros)

    mapper = ApiTypeMapper()
    for resources in resource_lists:
        mapper.add_resources(resources)

    logger.info("Discovered %s kinds on %s", len(mapper.get_kinds()), server)
    return mapper
