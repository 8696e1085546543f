"""Pytest configuration and fixtures."""

import json
import random
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from charnet.config import Settings, get_test_settings
from charnet.hover import HoverListener
from charnet.ingestion import Dataset
from charnet.models import PickableBody


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with a fixed layout seed."""
    return get_test_settings()


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible placement."""
    return random.Random(42)


@pytest.fixture
def three_node_dataset() -> Dataset:
    """A and B connected, C on its own."""
    return Dataset(
        nodes=[
            {"name": "A", "group": 0},
            {"name": "B", "group": 0},
            {"name": "C", "group": 1},
        ],
        links=[{"source": 0, "target": 1}],
    )


@pytest.fixture
def two_cluster_dataset() -> Dataset:
    """Two 4-cliques joined by a single bridge edge."""
    nodes = [{"name": f"n{i}", "group": i // 4} for i in range(8)]
    links = []
    for base in (0, 4):
        for i in range(base, base + 4):
            for j in range(i + 1, base + 4):
                links.append({"source": i, "target": j})
    links.append({"source": 3, "target": 4})
    return Dataset(nodes=nodes, links=links)


@pytest.fixture
def dataset_file(tmp_path: Path, three_node_dataset: Dataset) -> Path:
    """Three-node dataset written as JSON, with extra link keys."""
    path = tmp_path / "network.json"
    data = {
        "nodes": three_node_dataset.nodes,
        "links": [dict(link, value=1) for link in three_node_dataset.links],
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def mock_listener() -> HoverListener:
    """Mock hover listener recording every callback."""
    return MagicMock(spec=HoverListener)


def make_body(
    node_id: int,
    position: tuple[float, float, float],
    radius: float = 1.0,
    name: str | None = None,
    color: int = 0x0078D4,
    scale: float = 1.0,
) -> PickableBody:
    """Build a body for picking and hover tests."""
    return PickableBody(
        node_id=node_id,
        name=name or f"node-{node_id}",
        group=0,
        position=position,
        radius=radius,
        original_color=color,
        original_scale=scale,
    )


@pytest.fixture
def body_factory():
    """Factory for PickableBody instances."""
    return make_body
