import logging
import os

import pandas as pd

from disjoint_graph.algorithms.graph import Graph

logger = logging.getLogger(__name__)


def as_int_weight(weight, where):
    """Convierte un peso a int; rechaza pesos con parte decimal."""
    if not float(weight).is_integer():
        raise ValueError(f"Peso no entero {weight!r} en {where}")
    return int(weight)


def load_graph(base_path="disjoint_graph/data", vertices_file="nodos.csv", edges_file="aristas.csv"):
    """
    Carga los archivos CSV y construye el grafo.
    - Los vértices provienen de 'nodos.csv' (columna 'node_id'); si el archivo
      no existe se toman de los extremos de las aristas
    - Las aristas provienen de 'aristas.csv' (source, target, weight, oneway)
    Retorna: Graph
    """

    # === CARGA DE ARISTAS ===
    edges_path = os.path.join(base_path, edges_file)
    edges_df = pd.read_csv(edges_path, dtype={'source': str, 'target': str})
    missing = {'source', 'target'} - set(edges_df.columns)
    if missing:
        raise ValueError(f"Faltan columnas en {edges_path}: {sorted(missing)}")
    if edges_df[['source', 'target']].isna().any().any():
        raise ValueError(f"Hay extremos de arista vacíos en {edges_path}")

    if 'weight' not in edges_df.columns:
        edges_df['weight'] = 1
    edges_df['weight'] = edges_df['weight'].fillna(1)
    if 'oneway' not in edges_df.columns:
        edges_df['oneway'] = 'F'

    # === CARGA DE VÉRTICES ===
    nodes_path = os.path.join(base_path, vertices_file)
    if os.path.exists(nodes_path):
        nodes_df = pd.read_csv(nodes_path, dtype={'node_id': str})
        if 'node_id' not in nodes_df.columns:
            raise ValueError(f"Falta la columna 'node_id' en {nodes_path}")
        if nodes_df['node_id'].isna().any():
            raise ValueError(f"Hay etiquetas 'node_id' vacías en {nodes_path}")
        vertices = nodes_df['node_id'].tolist()
    else:
        # Orden de primera aparición en las aristas
        endpoints = edges_df[['source', 'target']].to_numpy().ravel()
        vertices = list(dict.fromkeys(endpoints))

    # === CONSTRUCCIÓN DEL GRAFO ===
    G = Graph()
    for v in vertices:
        G.add_vertex(v)

    for i, row in enumerate(edges_df.itertuples(index=False), start=1):
        # "T" = un solo sentido
        directed = str(row.oneway).strip().upper() == 'T'
        weight = as_int_weight(row.weight, f"{edges_path} fila {i}")
        G.add_edge(row.source, row.target, weight=weight, directed=directed)

    logger.info("Grafo cargado con %d nodos y %d aristas.", G.get_num_nodes(), G.get_num_edges())
    return G
