import json
import math
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from routegraph.topology.shortest_paths import ShortestPathTable


def write_mst_cost(total_cost: int, output_path: str) -> None:
    """Overwrite output_path with the MST total cost line."""
    Path(output_path).write_text(f"Total cost of MST: {total_cost}\n", encoding="utf-8")


def distance_frame(table: ShortestPathTable) -> pd.DataFrame:
    """Distance matrix as a DataFrame (index = origin, columns = destination).

    Unreachable cells hold the string "INF" so the frame round-trips through CSV
    without float artifacts.
    """
    order = table.nodes
    data = [
        ["INF" if math.isinf(d) else int(d) for d in (table.distance(o, dst) for dst in order)]
        for o in order
    ]
    df = pd.DataFrame(data, index=order, columns=order, dtype=object)
    df.index.name = "origin"
    return df


def write_distance_matrix_csv(table: ShortestPathTable, output_path: str) -> None:
    distance_frame(table).to_csv(output_path)


class JSONReporter:
    """Generates JSON shortest-path reports"""

    def generate(
        self,
        table: ShortestPathTable,
        output_path: str,
        pairs: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> Dict:
        """Write the distance matrix and the requested routes to a JSON file"""
        matrix = {
            o: {d: (None if math.isinf(v) else int(v)) for d, v in row.items()}
            for o, row in table.matrix().items()
        }
        routes: List[Dict] = []
        for origin, destination in pairs or []:
            path = table.reconstruct_path(origin, destination)
            d = table.distance(origin, destination)
            routes.append({
                "origin": origin,
                "destination": destination,
                "distance": None if math.isinf(d) else int(d),
                "path": path,
            })

        report = {
            "nodes": table.nodes,
            "distances": matrix,
            "routes": routes,
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

        return report
