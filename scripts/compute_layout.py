#!/usr/bin/env python3
"""Compute a 3D force layout for a network dataset.

Loads {nodes, links} JSON, runs the force layout to completion and prints
distance metrics. Optionally writes the laid-out graph to a JSON file.

Usage:
    uv run python scripts/compute_layout.py --input data/network.json

    # Reproducible layout written to disk
    uv run python scripts/compute_layout.py -i data/network.json -o layout.json --seed 7
"""

import argparse
import asyncio
import json
import logging
import random
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

from charnet.config import settings
from charnet.ingestion import load_dataset
from charnet.layout import ForceLayout, compute_layout_metrics
from charnet.models import Graph

logger = logging.getLogger(__name__)


async def compute_layout(
    input_path: Path,
    output_path: Path | None,
    seed: int | None,
    iterations: int,
) -> None:
    dataset = await load_dataset(input_path)

    graph = Graph.initialize(
        dataset.nodes,
        dataset.links,
        rng=random.Random(seed),
        extent=settings.layout_initial_extent,
    )
    result = ForceLayout(iterations=iterations).run(graph)
    metrics = compute_layout_metrics(graph)

    logger.info(f"Iterations: {result.iterations}, skipped zero-length edges: {result.skipped_edges}")
    logger.info(f"Final kinetic energy: {result.kinetic_energy:.4f}")
    if metrics.mean_edge_length is not None:
        logger.info(f"Mean edge length: {metrics.mean_edge_length:.2f}")
    if metrics.mean_unconnected_distance is not None:
        logger.info(f"Mean unconnected distance: {metrics.mean_unconnected_distance:.2f}")
    logger.info(f"Max radius from centroid: {metrics.max_radius:.2f}")

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(graph.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Layout written to {output_path}")


def main():
    parser = argparse.ArgumentParser(description="Compute a 3D force layout for a network dataset")
    parser.add_argument(
        "-i", "--input",
        type=Path,
        default=Path(settings.dataset_path),
        help=f"Dataset JSON (default: {settings.dataset_path})",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write laid-out nodes and links to this JSON file",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        default=settings.layout_seed,
        help="Seed for initial placement (default: unseeded)",
    )
    parser.add_argument(
        "-n", "--iterations",
        type=int,
        default=settings.layout_iterations,
        help=f"Relaxation iterations (default: {settings.layout_iterations})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    asyncio.run(compute_layout(
        input_path=args.input,
        output_path=args.output,
        seed=args.seed,
        iterations=args.iterations,
    ))


if __name__ == "__main__":
    main()
