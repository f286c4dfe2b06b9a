import networkx as nx

from disjoint_graph.algorithms.graph import Graph
from disjoint_graph.utils.graph_loader import as_int_weight


def to_networkx(graph, directed=False):
    """
    Convierte un Graph a networkx (nx.Graph o nx.DiGraph).
    El peso de cada arista se guarda en el atributo 'weight'.
    """
    G = nx.DiGraph() if directed else nx.Graph()
    G.add_nodes_from(graph)
    for edge in graph.get_edges():
        G.add_edge(edge.source, edge.destination, weight=edge.weight)
    return G


def from_networkx(G, default_weight=1):
    """
    Construye un Graph a partir de un grafo de networkx.
    Las aristas son dirigidas si G lo es; sin atributo 'weight' se usa default_weight.
    """
    graph = Graph()
    for n in G.nodes:
        graph.add_vertex(n)
    directed = G.is_directed()
    for u, v, data in G.edges(data=True):
        weight = as_int_weight(data.get("weight", default_weight), f"arista ({u!r}, {v!r})")
        graph.add_edge(u, v, weight=weight, directed=directed)
    return graph
