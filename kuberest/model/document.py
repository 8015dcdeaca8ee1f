import json
from typing import Any, Dict, Optional, Sequence, Union

RawObject = Dict[str, Any]
PropertyPath = Sequence[str]

KIND = "kind"
APIVERSION = "apiVersion"


def parse_document(text: Union[str, bytes]) -> RawObject:
    """Parses wire text into a mutable document. Raises ValueError if the text
    is not json or if the top level value is not an object."""

    if isinstance(text, bytes):
        text = text.decode("utf-8")

    dct = json.loads(text)
    if not isinstance(dct, dict):
        raise ValueError("Expected a json object, got: %s" % type(dct).__name__)

    return dct


def new_document() -> RawObject:
    return {}


def stamp_document(dct: RawObject, *, version: str, kind: str) -> None:
    dct[APIVERSION] = version
    dct[KIND] = kind


def get_path(dct: RawObject, path: PropertyPath) -> Optional[Any]:
    "Returns the value at path or None, never creates intermediate nodes"

    node: Any = dct
    for key in path:
        if not isinstance(node, dict):
            return None

        node = node.get(key)
        if node is None:
            return None

    return node


def set_path(dct: RawObject, path: PropertyPath, value: Any) -> None:
    *parents, leaf = path

    node = dct
    for key in parents:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child

    node[leaf] = value


def delete_path(dct: RawObject, path: PropertyPath) -> None:
    *parents, leaf = path

    node = get_path(dct, parents) if parents else dct
    if isinstance(node, dict):
        node.pop(leaf, None)


def dump_document(dct: RawObject) -> str:
    return json.dumps(dct)
