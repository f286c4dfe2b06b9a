import logging
from typing import Any, Dict, List, Union

from fastapi import FastAPI
from pydantic import BaseModel

from disjoint_graph.algorithms.connected_components import connected_components
from disjoint_graph.algorithms.errors import DisjointGraphError
from disjoint_graph.algorithms.graph import Graph
from disjoint_graph.algorithms.kruskal import kruskal_mst
from disjoint_graph.config import get_settings
from disjoint_graph.utils.graph_loader import load_graph

Label = Union[int, str]


class EdgeModel(BaseModel):
    source: Label
    target: Label
    weight: int = 1
    directed: bool = False


class GraphRequest(BaseModel):
    vertices: List[Label]
    edges: List[EdgeModel] = []


settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="disjoint-graph")


def build_graph(req: GraphRequest) -> Graph:
    """Construye el Graph descrito en la petición."""
    graph = Graph()
    for v in req.vertices:
        graph.add_vertex(v)
    for e in req.edges:
        graph.add_edge(e.source, e.target, weight=e.weight, directed=e.directed)
    return graph


def components_payload(graph: Graph) -> Dict[str, Any]:
    components = connected_components(graph)
    return {
        "components": components,
        "num_components": len(components),
    }


def mst_payload(graph: Graph) -> Dict[str, Any]:
    mst = kruskal_mst(graph)
    return {
        "edges": [
            {"source": e.source, "target": e.destination, "weight": e.weight}
            for e in mst.get_edges()
        ],
        "num_edges": mst.get_num_edges(),
        "total_weight": mst.get_sum_of_weights(),
    }


def load_dataset() -> Graph:
    return load_graph(
        base_path=settings.data_dir,
        vertices_file=settings.vertices_file,
        edges_file=settings.edges_file,
    )


@app.post("/components")
async def get_components(req: GraphRequest):
    try:
        graph = build_graph(req)
        logger.info("Componentes de un grafo con %d nodos y %d aristas.",
                    graph.get_num_nodes(), graph.get_num_edges())
        return components_payload(graph)
    except DisjointGraphError as e:
        return {"error": f"Grafo inválido: {e}"}


@app.post("/mst")
async def get_mst(req: GraphRequest):
    try:
        graph = build_graph(req)
        logger.info("Kruskal sobre un grafo con %d nodos y %d aristas.",
                    graph.get_num_nodes(), graph.get_num_edges())
        return mst_payload(graph)
    except DisjointGraphError as e:
        return {"error": f"Grafo inválido: {e}"}


@app.get("/dataset/components")
async def get_dataset_components():
    try:
        return components_payload(load_dataset())
    except FileNotFoundError as e:
        return {"error": f"No se encontró el dataset: {e}"}
    except (DisjointGraphError, ValueError) as e:
        return {"error": f"Dataset inválido: {e}"}


@app.get("/dataset/mst")
async def get_dataset_mst():
    try:
        return mst_payload(load_dataset())
    except FileNotFoundError as e:
        return {"error": f"No se encontró el dataset: {e}"}
    except (DisjointGraphError, ValueError) as e:
        return {"error": f"Dataset inválido: {e}"}
