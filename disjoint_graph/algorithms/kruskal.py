import logging

from disjoint_graph.algorithms.graph import Graph
from disjoint_graph.algorithms.union_find import DisjointSet

logger = logging.getLogger(__name__)


def kruskal_mst(graph):
    """
    Implementación del algoritmo de Kruskal.
    Construye un bosque de expansión mínima (un árbol si el grafo es conexo).
    Parámetros:
        graph: Graph
    Retorna:
        mst: Graph no dirigido con los mismos vértices
    """
    mst = Graph()
    dsu = DisjointSet()
    for v in graph:
        mst.add_vertex(v)
        dsu.make_set(v)

    # Ordenar una copia: el grafo de entrada no se modifica
    for edge in sorted(graph.get_edges()):
        u, v = edge.source, edge.destination
        if not dsu.same_set(u, v):
            mst.add_edge(u, v, edge.weight)
            dsu.union(u, v)

    logger.debug(
        "kruskal_mst: %d aristas elegidas, peso total %d, %d componentes",
        mst.get_num_edges(), mst.get_sum_of_weights(), dsu.get_num_sets(),
    )
    return mst
