import csv
from typing import List, Optional

import typer
from rich.console import Console

from routegraph.io.edge_reader import EdgeListError, load_graph
from routegraph.io.entity_reader import ATTRIBUTE_COLUMN, MIN_COLUMNS, load_entities
from routegraph.logging_config import setup_logging
from routegraph.reports.file_report import JSONReporter, write_distance_matrix_csv, write_mst_cost
from routegraph.reports.terminal_report import (
    print_connected,
    print_distance_table,
    print_mst_summary,
    print_route,
)
from routegraph.social import AttributeNetwork, ConnectivityDetector
from routegraph.topology import Graph, ShortestPathTable, prim_mst


app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", envvar="ROUTEGRAPH_VERBOSE", help="Enable debug logging."),
):
    """Minimum spanning trees, shortest-path tables and attribute connectivity."""
    setup_logging(verbose)


def _load_graph(edges_file: str) -> Graph:
    try:
        return load_graph(edges_file)
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e))
    except EdgeListError as e:
        raise typer.BadParameter(f"Malformed edge list {edges_file}: {e}")
    except ValueError as e:
        raise typer.BadParameter(f"Invalid edge in {edges_file}: {e}")


@app.command()
def mst(
    edges_file: str = typer.Argument(..., help="Edge list: header line, then 'origin destination weight' per line."),
    start: Optional[str] = typer.Option(None, "--start", help="Start node (defaults to the first node in the file)."),
    out: str = typer.Option("mst_output.txt", "--out", envvar="ROUTEGRAPH_MST_OUT", help="File that receives the total MST cost."),
):
    """Compute a minimum spanning tree with Prim's algorithm and write its total cost."""
    graph = _load_graph(edges_file)
    if start is not None and start not in graph:
        raise typer.BadParameter(f"Start node {start!r} is not in the graph")

    result = prim_mst(graph, start)
    print_mst_summary(result.total_cost, len(result.tree_nodes), len(graph), console=console)
    write_mst_cost(result.total_cost, out)
    console.print(f"[green]OK[/green] MST cost written to: {out}")


@app.command()
def paths(
    edges_file: str = typer.Argument(..., help="Edge list: header line, then 'origin destination weight' per line."),
    origin: Optional[str] = typer.Option(None, "--origin", help="Origin node for a route query."),
    destination: Optional[str] = typer.Option(None, "--destination", help="Destination node for a route query."),
    out_csv: Optional[str] = typer.Option(None, "--out-csv", help="Write the distance matrix to this CSV path."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write the distance matrix and route to this JSON path."),
    show_table: bool = typer.Option(True, "--table/--no-table", help="Print the distance matrix."),
):
    """Build the all-pairs shortest-path table and optionally answer one route query."""
    if (origin is None) != (destination is None):
        raise typer.BadParameter("--origin and --destination must be given together")

    graph = _load_graph(edges_file)
    table = ShortestPathTable(graph).build()

    if show_table:
        print_distance_table(table, console=console)

    pairs: List = []
    if origin is not None:
        origin, destination = origin.strip(), destination.strip()
        pairs.append((origin, destination))
        print_route(table, origin, destination, console=console)

    if out_csv:
        write_distance_matrix_csv(table, out_csv)
        console.print(f"[green]OK[/green] Distance matrix saved to: {out_csv}")
    if out_json:
        JSONReporter().generate(table, out_json, pairs=pairs)
        console.print(f"[green]OK[/green] JSON report saved to: {out_json}")


@app.command()
def connected(
    users_csv: str = typer.Argument(..., help="Users CSV with a header row (id, name, ..., country)."),
    country: str = typer.Argument(..., help="Attribute value to search, matched case-insensitively."),
    attribute_column: int = typer.Option(ATTRIBUTE_COLUMN, "--attribute-column", envvar="ROUTEGRAPH_ATTRIBUTE_COLUMN", help="Zero-based column holding the grouping attribute."),
    min_columns: int = typer.Option(MIN_COLUMNS, "--min-columns", envvar="ROUTEGRAPH_MIN_COLUMNS", help="Rows with fewer columns are skipped."),
):
    """Find users connected within a country (attribute group) via DFS."""
    try:
        entities = load_entities(users_csv, attribute_column=attribute_column, min_columns=min_columns)
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e))
    except (ValueError, csv.Error) as e:
        raise typer.BadParameter(f"Unreadable users CSV {users_csv}: {e}")

    network = AttributeNetwork(entities)
    detector = ConnectivityDetector()
    found = detector.find_connected(network.entities, country)
    print_connected(found, country.strip(), console=console)


if __name__ == "__main__":
    app()
