class DisjointGraphError(Exception):
    """Error base de la librería."""


class DuplicateKeyError(DisjointGraphError, ValueError):
    """La etiqueta ya existe en la estructura (conjunto o vértice)."""

    def __init__(self, label, message=None):
        self.label = label
        super().__init__(message or f"La etiqueta {label!r} ya existe.")


class NotFoundError(DisjointGraphError, LookupError):
    """La etiqueta no existe en la estructura."""

    def __init__(self, label, message=None):
        self.label = label
        super().__init__(message or f"La etiqueta {label!r} no existe.")
