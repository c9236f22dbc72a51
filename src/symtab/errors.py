class InvalidName(ValueError):
    """Nombre vacío, en blanco o con un segmento vacío."""

    def __init__(self, name, reason: str = "nombre inválido"):
        super().__init__(f"{reason}: {name!r}")
        self.name = name
        self.reason = reason
