#!/usr/bin/env python3
"""
Demo script for edgeschematic.

Prints the schematics computed for a few sample graphs.
"""

import logging

from edgeschematic import (
    Edge,
    EdgeType,
    GraphSettings,
    GraphTheme,
    Node,
    SchematicExporter,
    SchematicTrace,
    build_edge_schematics,
    get_edge_schematic,
)


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def demo_1():
    """Demo 1: Arrows, a line and a reverse pair"""
    print_header("Demo 1: Straight Edges")

    nodes = [
        Node("1", "A", 100, 100),
        Node("2", "B", 400, 100),
        Node("3", "C", 250, 350),
    ]
    edges = [
        Edge("ab", "A", "B", weight=4),
        Edge("ba", "B", "A", weight=2),
        Edge("bc", "B", "C", EdgeType.UNDIRECTED, weight=7),
    ]
    print(SchematicExporter().to_json(build_edge_schematics(nodes, edges)))


def demo_2():
    """Demo 2: Self-loop placed away from its neighbours"""
    print_header("Demo 2: Self-Loop")

    nodes = [
        Node("1", "Hub", 200, 200),
        Node("2", "East", 450, 200),
        Node("3", "South", 200, 450),
    ]
    edges = [
        Edge("loop", "Hub", "Hub"),
        Edge("he", "Hub", "East"),
        Edge("sh", "South", "Hub"),
    ]
    print(SchematicExporter().to_json(build_edge_schematics(nodes, edges)))


def demo_3():
    """Demo 3: Trace of a suppressed edge"""
    print_header("Demo 3: Overlapping Nodes")

    nodes = [Node("1", "A", 100, 100), Node("2", "B", 140, 100)]
    edge = Edge("ab", "A", "B")
    trace = SchematicTrace()
    result = get_edge_schematic(
        edge, nodes, [edge], GraphTheme(), GraphSettings(), trace=trace
    )
    print(f"Result: {result}")
    print(trace.dump())


def main():
    """Run all demos."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    demo_1()
    demo_2()
    demo_3()


if __name__ == "__main__":
    main()
