"""charnet data models."""

from charnet.models.body import PickableBody, Ray, Vector3
from charnet.models.graph import Edge, Graph, GraphDataError, Node

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphDataError",
    "PickableBody",
    "Ray",
    "Vector3",
]
