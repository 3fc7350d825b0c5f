"""Inspect a category tree payload: size, depth, and integrity."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from cattree.exceptions import CattreeError
from cattree.fetch import parse_forest_payload
from cattree.tree_index import TreeIndex, build_index


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a category tree from the API or a JSON file.")
    parser.add_argument("--url", help="URL to fetch (e.g. http://localhost:5000/api/v1/categories/tree)")
    parser.add_argument("--file", help="Local JSON file path")
    parser.add_argument("--widest", type=int, default=5, help="Number of widest categories to list")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    payload = load_payload(url=args.url, file_path=args.file)
    try:
        index = build_index(parse_forest_payload(payload))
    except CattreeError as exc:
        parser.exit(1, f"Invalid category tree: {exc}\n")

    depths, widths = collect_stats(index)
    leaf_count = sum(1 for node_id in index.ids if index.is_leaf(node_id))

    print(f"Roots: {len(index.roots)}")
    print(f"Categories: {len(index)}")
    print(f"Leaves: {leaf_count}")

    print("\nCategories per depth:")
    for depth in sorted(depths):
        print(f"{depth}: {depths[depth]}")

    print("\nWidest categories:")
    for node_id, count in widths.most_common(args.widest):
        print(f"{index.titles[node_id] or node_id} ({node_id}): {count} children")


def load_payload(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Category tree file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(index: TreeIndex) -> tuple[Counter, Counter]:
    depths = Counter()
    widths = Counter()

    for node_id in index.ids:
        depths[index.depth_of(node_id)] += 1
        children = index.children_of(node_id)
        if children:
            widths[node_id] = len(children)
    return depths, widths


if __name__ == "__main__":
    main()
