from __future__ import annotations

import math
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from routegraph.models import Entity
from routegraph.topology.shortest_paths import ShortestPathTable


def format_distance(d: float) -> str:
    return "INF" if math.isinf(d) else str(int(d))


def print_distance_table(table: ShortestPathTable, console: Optional[Console] = None) -> None:
    """
    Prints the all-pairs distance matrix, rows are origins and columns destinations.
    Unreachable pairs show as INF.
    """
    console = console or Console()

    t = Table(title="Shortest Path Table")
    t.add_column("From\\To", style="bold")
    order = table.nodes
    for destination in order:
        t.add_column(destination, justify="right")

    for origin in order:
        t.add_row(origin, *(format_distance(table.distance(origin, d)) for d in order))

    console.print(t)


def print_route(
    table: ShortestPathTable,
    origin: str,
    destination: str,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    if not table.is_reachable(origin, destination):
        console.print(f"[yellow]No path found between {origin} and {destination}[/yellow]")
        return

    distance = format_distance(table.distance(origin, destination))
    path = table.reconstruct_path(origin, destination)
    console.print(f"Shortest path distance from {origin} to {destination} is: [bold]{distance}[/bold]")
    console.print(f"Path taken: {' -> '.join(path)}")


def print_mst_summary(total_cost: int, spanned: int, total_nodes: int, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"[bold]Total cost of MST:[/bold] {total_cost}")
    if spanned < total_nodes:
        console.print(
            f"[yellow]Graph is disconnected: tree spans {spanned} of {total_nodes} node(s)[/yellow]"
        )


def print_connected(entities: Iterable[Entity], target: str, console: Optional[Console] = None) -> None:
    console = console or Console()
    found = sorted(entities, key=lambda e: e.id)
    if not found:
        console.print(f"No connected users found in {target}.")
        return
    console.print(f"[bold]Connected users in {target}:[/bold]")
    for entity in found:
        console.print(str(entity), markup=False)
