from __future__ import annotations

from collections.abc import Iterator

import yaml

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

_STR_TAG = "tag:yaml.org,2002:str"


def compose_documents(text: str, source: str) -> list[yaml.Node]:
    try:
        return [node for node in yaml.compose_all(text, Loader=yaml.SafeLoader) if node is not None]
    except yaml.YAMLError as exc:
        raise ScriptError(f"{source}: invalid YAML: {exc}", ERR_CONFIG, kind="yaml_invalid") from exc


def iter_item_paths(node: yaml.Node) -> Iterator[tuple[str, int]]:
    """Yield `(value, line)` for every `path` key of a mapping that is a sequence item.

    Lines are 1-based. Traversal is depth-first in document order.
    """
    if isinstance(node, yaml.SequenceNode):
        for item in node.value:
            if isinstance(item, yaml.MappingNode):
                for key_node, value_node in item.value:
                    if (
                        isinstance(key_node, yaml.ScalarNode)
                        and key_node.value == "path"
                        and isinstance(value_node, yaml.ScalarNode)
                        and value_node.tag == _STR_TAG
                        and value_node.value.strip()
                    ):
                        yield value_node.value.strip(), key_node.start_mark.line + 1
            yield from iter_item_paths(item)
    elif isinstance(node, yaml.MappingNode):
        for _key_node, value_node in node.value:
            yield from iter_item_paths(value_node)
