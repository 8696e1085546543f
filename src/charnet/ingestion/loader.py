"""Dataset loader for {nodes, links} network JSON."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when a dataset file is missing or not shaped like a network."""


@dataclass
class Dataset:
    """Validated raw records, ready for Graph.initialize."""

    nodes: list[dict] = field(default_factory=list)
    links: list[dict] = field(default_factory=list)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_dataset(data: dict) -> Dataset:
    """
    Validate the shape of a parsed network document.

    Node records need a string "name" and integer "group"; link records need
    integer "source" and "target". Other keys (e.g. link "value") are
    dropped. Whether link indices point at real nodes is checked by
    Graph.initialize.
    """
    if not isinstance(data, dict):
        raise DatasetError(f"Expected a JSON object, got {type(data).__name__}")

    raw_nodes = data.get("nodes")
    raw_links = data.get("links", [])
    if not isinstance(raw_nodes, list):
        raise DatasetError("Dataset must contain a 'nodes' list")
    if not isinstance(raw_links, list):
        raise DatasetError("'links' must be a list")

    nodes = []
    for i, node in enumerate(raw_nodes):
        if not isinstance(node, dict):
            raise DatasetError(f"Node {i} is not an object")
        name, group = node.get("name"), node.get("group", 0)
        if not isinstance(name, str):
            raise DatasetError(f"Node {i} has no string 'name'")
        if not _is_int(group):
            raise DatasetError(f"Node {i} ({name}) has non-integer group {group!r}")
        nodes.append({"name": name, "group": group})

    links = []
    for i, link in enumerate(raw_links):
        if not isinstance(link, dict):
            raise DatasetError(f"Link {i} is not an object")
        source, target = link.get("source"), link.get("target")
        if not (_is_int(source) and _is_int(target)):
            raise DatasetError(f"Link {i} needs integer source/target, got {source!r}, {target!r}")
        links.append({"source": source, "target": target})

    return Dataset(nodes=nodes, links=links)


async def load_dataset(path: Path | str) -> Dataset:
    """Read and validate a network JSON file."""
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"Dataset not found: {path}")

    async with aiofiles.open(path, encoding="utf-8") as f:
        content = await f.read()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Invalid JSON in {path}: {e}") from e

    dataset = parse_dataset(data)
    logger.info(f"Loaded {len(dataset.nodes)} nodes and {len(dataset.links)} links from {path}")
    return dataset
