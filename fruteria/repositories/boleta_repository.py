# ==============================================================================
# REPOSITORIO DE BOLETAS
# ==============================================================================
# Boletas en memoria: [Boleta("B001"), Boleta("B002"), ...]
# El almacén es la única autoridad del total: lo recalcula en cada escritura.
# ==============================================================================

from typing import Any, Iterable, Mapping, Union

from fruteria.models import Boleta, OrderLine
from fruteria.repositories.base import MemoryRepository


def calculate_total(pedido: Iterable[Union[OrderLine, Mapping[str, Any]]]) -> float:
    """
    Suma precio * cantidad de todas las líneas, redondeado a 2 decimales.

    Args:
        pedido: Líneas de pedido (OrderLine o diccionarios con 'precio' y 'cantidad')

    Returns:
        Total de la boleta
    """
    total = 0.0
    for line in pedido:
        if isinstance(line, Mapping):
            total += float(line['precio']) * int(line['cantidad'])
        else:
            total += line.precio * line.cantidad
    return round(total, 2)


class BoletaRepository(MemoryRepository):
    """
    Almacén de boletas.

    IDs: "B001", "B002"... (posición después de insertar, 3 dígitos).
    El campo ``total`` nunca se toma del llamador.
    """

    entity_type = Boleta
    entity_label = 'Boleta'

    def _format_id(self, number: int) -> str:
        return f"B{number:03d}"

    def _prepare(self, record: Boleta) -> Boleta:
        record.total = calculate_total(record.pedido)
        return record

    @staticmethod
    def calculate_total(pedido: Iterable[Union[OrderLine, Mapping[str, Any]]]) -> float:
        """Total de un pedido (ver calculate_total del módulo)."""
        return calculate_total(pedido)
