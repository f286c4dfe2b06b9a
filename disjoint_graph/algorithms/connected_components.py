import logging

from disjoint_graph.algorithms.union_find import DisjointSet

logger = logging.getLogger(__name__)


def connected_components(graph):
    """
    Componentes conexas usando Union–Find.
    Las aristas dirigidas se tratan como no dirigidas (componentes débiles).
    Parámetros:
        graph: Graph
    Retorna:
        lista de componentes, cada una una lista de vértices
    """
    dsu = DisjointSet()
    for v in graph:
        dsu.make_set(v)

    for edge in graph.get_edges():
        dsu.union(edge.source, edge.destination)

    components = list(dsu.get_sets().values())
    logger.debug(
        "connected_components: %d vértices, %d aristas -> %d componentes",
        graph.get_num_nodes(), graph.get_num_edges(), len(components),
    )
    return components
