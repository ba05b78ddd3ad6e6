# ==============================================================================
# BORRADOR DE BOLETA
# ==============================================================================
# Lista de productos "en edición" de un formulario de boleta.
# Es transitoria: nada llega al almacén hasta llamar a commit().
# ==============================================================================

import copy
import logging
from typing import Any, Dict, List, Optional

from fruteria.models import BOLETA_HEADER_FIELDS, Boleta, OrderLine, Unidad
from fruteria.repositories import IProductRepository, calculate_total

logger = logging.getLogger(__name__)


class BoletaDraft:
    """
    Borrador de una boleta nueva o en edición.

    Responsabilidades:
    - Guardar la cabecera que va llenando el formulario
    - Agregar/eliminar líneas tomando una instantánea del catálogo
    - Fusionar líneas repetidas (mismo producto → suma cantidades)
    - Calcular el total provisional

    El catálogo solo se lee; nunca se modifica desde aquí.
    """

    def __init__(
        self,
        product_repo: IProductRepository,
        boleta_service: Any = None,
        editing: Optional[Boleta] = None
    ):
        """
        Inicializa el borrador.

        Args:
            product_repo: Catálogo del que se copian los productos
            boleta_service: Servicio que ejecuta commit() (opcional)
            editing: Boleta existente a editar (None para una nueva)
        """
        self.product_repo = product_repo
        self.boleta_service = boleta_service
        self.reset()
        if editing is not None:
            self.editing_id = editing.id
            self.header.update(editing.header())
            self._lines = copy.deepcopy(editing.pedido)

    @property
    def is_new(self) -> bool:
        """True si el borrador creará una boleta nueva."""
        return self.editing_id is None

    @property
    def lines(self) -> List[OrderLine]:
        """Copia de las líneas actuales."""
        return copy.deepcopy(self._lines)

    @property
    def total(self) -> float:
        """Total provisional del borrador."""
        return calculate_total(self._lines)

    # =========================================================================
    # CABECERA
    # =========================================================================

    def set_header(self, **fields: Any) -> None:
        """
        Actualiza campos de cabecera.

        Raises:
            TypeError: Si algún campo no pertenece a la cabecera
        """
        unknown = set(fields) - set(BOLETA_HEADER_FIELDS)
        if unknown:
            raise TypeError(f"Campos de cabecera desconocidos: {', '.join(sorted(unknown))}")
        self.header.update(fields)

    # =========================================================================
    # LÍNEAS
    # =========================================================================

    def add_line(self, line: OrderLine) -> OrderLine:
        """
        Agrega una línea al pedido.
        Si ya hay una línea del mismo producto, suma la cantidad y conserva
        la unidad y el precio de la línea existente.

        Args:
            line: Línea a agregar

        Returns:
            Copia de la línea resultante
        """
        for existing in self._lines:
            if existing.id == line.id:
                existing.cantidad += line.cantidad
                return copy.deepcopy(existing)
        self._lines.append(copy.deepcopy(line))
        return copy.deepcopy(line)

    def add_product(
        self,
        product_id: str,
        cantidad: Any = 1,
        unidad: Any = Unidad.UNIDAD
    ) -> Dict[str, Any]:
        """
        Agrega un producto del catálogo al pedido.

        Args:
            product_id: ID del producto seleccionado
            cantidad: Cantidad a agregar (entero mayor a 0)
            unidad: Unidad de despacho (kg, unidad, litro, caja)

        Returns:
            Dict con resultado (ok, error, linea, pedido)
        """
        if not product_id:
            return {'ok': False, 'error': 'Debe seleccionar un producto'}

        # 2.7 y '2.5' se rechazan igual; 3 y '3' son válidos
        try:
            numero = float(cantidad)
        except (TypeError, ValueError):
            return {'ok': False, 'error': 'La cantidad debe ser un número entero'}
        if not numero.is_integer():
            return {'ok': False, 'error': 'La cantidad debe ser un número entero'}
        cantidad = int(numero)
        if cantidad <= 0:
            return {'ok': False, 'error': 'La cantidad debe ser mayor a 0'}

        try:
            unidad = Unidad(unidad)
        except ValueError:
            return {'ok': False, 'error': f"Unidad inválida: {unidad}"}

        product = self.product_repo.get_by_id(product_id)
        if product is None:
            return {'ok': False, 'error': 'Producto no encontrado'}

        line = self.add_line(OrderLine.from_product(product, cantidad, unidad))
        logger.debug(f"Borrador: {product.nombre} x{cantidad} ({unidad.value})")

        return {
            'ok': True,
            'mensaje': 'Producto agregado',
            'linea': line,
            'pedido': self.summary()
        }

    def remove_product(self, product_id: str) -> Dict[str, Any]:
        """
        Quita la línea de un producto.

        Args:
            product_id: ID del producto

        Returns:
            Dict con resultado (ok, removed, pedido)
        """
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.id != product_id]
        return {
            'ok': True,
            'removed': len(self._lines) < before,
            'pedido': self.summary()
        }

    def clear(self) -> None:
        """Vacía las líneas del pedido (la cabecera se conserva)."""
        self._lines = []

    def reset(self) -> None:
        """Deja el borrador como recién creado para una boleta nueva."""
        self.editing_id: Optional[str] = None
        self.header: Dict[str, Any] = {name: '' for name in BOLETA_HEADER_FIELDS}
        self._lines: List[OrderLine] = []

    def summary(self) -> Dict[str, Any]:
        """
        Resumen del pedido en edición.

        Returns:
            Dict con items_count, total_items, total
        """
        return {
            'items_count': len(self._lines),
            'total_items': sum(line.cantidad for line in self._lines),
            'total': self.total
        }

    # =========================================================================
    # CONFIRMACIÓN
    # =========================================================================

    def commit(self) -> Dict[str, Any]:
        """
        Guarda el borrador en el almacén de boletas (alta o edición).

        Returns:
            Dict con resultado de BoletaService.commit

        Raises:
            RuntimeError: Si el borrador no tiene servicio asociado
        """
        if self.boleta_service is None:
            raise RuntimeError("El borrador no tiene un servicio de boletas asociado")
        return self.boleta_service.commit(self)
