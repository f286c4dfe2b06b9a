from dataclasses import dataclass
from typing import Dict, FrozenSet, Hashable, Iterator, List, Tuple

from disjoint_graph.algorithms.errors import DuplicateKeyError, NotFoundError


@dataclass(frozen=True)
class Edge:
    """Arista (source -> destination) con peso entero."""
    source: Hashable
    destination: Hashable
    weight: int = 1

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        # Las aristas se ordenan solo por peso
        return self.weight < other.weight

    def reversed(self) -> "Edge":
        """Copia con origen y destino intercambiados (mismo peso)."""
        return Edge(self.destination, self.source, self.weight)

    def __str__(self):
        return f"Edge{{src={self.source}, dst={self.destination}, w={self.weight}}}"


class Graph:
    """
    Grafo genérico con listas de adyacencia.
    Admite aristas dirigidas / no dirigidas y con / sin peso.
    """

    def __init__(self):
        self._adj: Dict[Hashable, List[Edge]] = {}
        self._edges: List[Edge] = []
        self._num_edges = 0
        self._sum_of_weights = 0

    def __contains__(self, label) -> bool:
        return label in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adj)

    def add_vertex(self, label) -> None:
        """Registra un vértice nuevo sin aristas."""
        if label in self._adj:
            raise DuplicateKeyError(label, f"El vértice {label!r} ya existe en el grafo.")
        self._adj[label] = []

    def add_edge(self, u, v, weight: int = 1, directed: bool = False) -> Edge:
        """
        Agrega la arista u -> v.
        Si no es dirigida, v recibe además la arista inversa en su lista de
        adyacencia (pero no en la lista global, para no contarla dos veces).
        """
        for label in (u, v):
            if label not in self._adj:
                raise NotFoundError(
                    label, f"El vértice {label!r} debe existir para crear una arista."
                )

        edge = Edge(u, v, weight)
        self._adj[u].append(edge)
        if not directed:
            self._adj[v].append(edge.reversed())
        self._edges.append(edge)
        self._num_edges += 1
        self._sum_of_weights += weight
        return edge

    def get_neighbors(self, label) -> Tuple[Edge, ...]:
        """Aristas salientes de 'label' (copia)."""
        if label not in self._adj:
            raise NotFoundError(label, f"El vértice {label!r} no existe en el grafo.")
        return tuple(self._adj[label])

    def get_vertices(self) -> FrozenSet[Hashable]:
        return frozenset(self._adj)

    def get_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def get_num_nodes(self) -> int:
        return len(self._adj)

    def get_num_edges(self) -> int:
        return self._num_edges

    def get_sum_of_weights(self) -> int:
        """Suma de pesos; en grafos sin peso coincide con el número de aristas."""
        return self._sum_of_weights
