import logging

from disjoint_graph.algorithms.errors import DuplicateKeyError, NotFoundError

logger = logging.getLogger(__name__)


class DisjointSet:
    """
    Implementación del algoritmo Union–Find (Disjoint Set Union).
    Usa compresión de caminos y unión por rango.
    Los padres se guardan como etiquetas: una raíz es su propio padre.
    """

    def __init__(self):
        self.parent = {}
        self.rank = {}
        self.num_sets = 0

    def __contains__(self, value):
        return value in self.parent

    def __len__(self):
        return len(self.parent)

    def get_num_sets(self):
        """Número de conjuntos disjuntos actuales."""
        return self.num_sets

    def make_set(self, value):
        """Crea un conjunto nuevo con un único elemento."""
        if value in self.parent:
            raise DuplicateKeyError(value, f"El elemento {value!r} ya pertenece a un conjunto.")
        self.parent[value] = value
        self.rank[value] = 0
        self.num_sets += 1

    def _require(self, value):
        if value not in self.parent:
            raise NotFoundError(value, f"El elemento {value!r} no pertenece a ningún conjunto.")

    def _find(self, v):
        if self.parent[v] != v:
            self.parent[v] = self._find(self.parent[v])  # Compresión de caminos
        return self.parent[v]

    def find_set(self, value):
        """Encuentra el representante (raíz) del conjunto que contiene a 'value'."""
        self._require(value)
        return self._find(value)

    def same_set(self, a, b):
        """Verifica si 'a' y 'b' pertenecen al mismo conjunto."""
        self._require(a)
        self._require(b)
        return self._find(a) == self._find(b)

    def union(self, a, b):
        """
        Une los conjuntos que contienen a 'a' y 'b'.
        Retorna False si ya estaban en el mismo conjunto (no se modifica nada).
        """
        self._require(a)
        self._require(b)
        rootA = self._find(a)
        rootB = self._find(b)
        if rootA == rootB:
            return False

        if self.rank[rootA] > self.rank[rootB]:
            self.parent[rootB] = rootA
        else:
            # Empate: la raíz de 'a' cuelga de la de 'b'
            self.parent[rootA] = rootB
            if self.rank[rootA] == self.rank[rootB]:
                self.rank[rootB] += 1

        self.num_sets -= 1
        return True

    def get_sets(self):
        """
        Agrupa los elementos por representante.
        Retorna: dict { representante: [elementos en orden de inserción] }
        """
        sets = {}
        for value in self.parent:
            sets.setdefault(self._find(value), []).append(value)
        return sets

    def format_sets(self):
        """Líneas legibles 'Set i: [...]' de cada conjunto."""
        lines = [
            f"Set {i}: {members}"
            for i, members in enumerate(self.get_sets().values(), start=1)
        ]
        for line in lines:
            logger.debug(line)
        return lines
