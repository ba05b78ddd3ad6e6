# ==============================================================================
# SERVICIO DE BOLETAS
# ==============================================================================
# Centraliza la lógica del formulario y de la tabla de boletas:
#   - Validación de la cabecera (cliente, fechas, transporte)
#   - Borradores de boleta y su confirmación (alta o edición)
#   - Filtros por cliente / RUC y vista de detalle
# El total lo calcula siempre el almacén; este servicio nunca lo fija.
# ==============================================================================

import logging
from typing import Any, Dict, List, Optional

from fruteria.models import BOLETA_HEADER_FIELDS, Boleta, parse_date
from fruteria.repositories import IBoletaRepository, IProductRepository
from fruteria.services.draft_service import BoletaDraft

logger = logging.getLogger(__name__)


# Mensajes del formulario (uno por campo obligatorio)
REQUIRED_MESSAGES = {
    'cliente': 'El cliente es requerido',
    'nombre_identidad': 'El nombre de identidad es requerido',
    'ruc': 'El RUC es requerido',
    'fecha_emision': 'La fecha de emisión es requerida',
    'fecha_traslado': 'La fecha de traslado es requerida',
    'transporte_marca': 'La marca de transporte es requerida',
    'transporte_placa': 'La placa de transporte es requerida',
    'num_const_inscripcion': 'El número de const. inscripción es requerido',
    'licencia_conducir': 'La licencia de conducir es requerida',
}

DATE_FIELDS = frozenset(['fecha_emision', 'fecha_traslado'])

INVALID_DATE_MESSAGE = 'Fecha inválida (use AAAA-MM-DD)'
EMPTY_ORDER_MESSAGE = 'Debe agregar al menos un producto a la boleta.'


class BoletaService:
    """
    Servicio para gestión de boletas.

    Responsabilidades:
    - Validar la cabecera antes de llegar al almacén
    - Crear borradores (nuevos o desde una boleta existente)
    - Confirmar borradores: add() si es nueva, update() si es edición
    - Filtrar y detallar boletas para la tabla

    El catálogo de productos solo se lee (para copiar productos al pedido).
    """

    def __init__(
        self,
        boleta_repo: IBoletaRepository,
        product_repo: IProductRepository
    ):
        """
        Inicializa el servicio de boletas.

        Args:
            boleta_repo: Almacén de boletas
            product_repo: Catálogo de productos (solo lectura)
        """
        self.boleta_repo = boleta_repo
        self.product_repo = product_repo

    # =========================================================================
    # VALIDACIÓN
    # =========================================================================

    def validate_header(self, data: Dict[str, Any]) -> Dict[str, str]:
        """
        Valida la cabecera del formulario de boleta.
        No se exige orden entre fecha de emisión y fecha de traslado.

        Args:
            data: Dict con los campos de cabecera

        Returns:
            Dict {campo: mensaje}; vacío si todo es válido
        """
        errors = {}
        for name in BOLETA_HEADER_FIELDS:
            value = data.get(name)
            if value is None or not str(value).strip():
                errors[name] = REQUIRED_MESSAGES[name]
                continue
            if name in DATE_FIELDS:
                try:
                    parse_date(value)
                except ValueError:
                    errors[name] = INVALID_DATE_MESSAGE
        return errors

    def _build(self, draft: BoletaDraft) -> Boleta:
        """Arma la boleta candidata a partir de un borrador válido."""
        fields = {}
        for name in BOLETA_HEADER_FIELDS:
            value = draft.header[name]
            fields[name] = parse_date(value) if name in DATE_FIELDS else str(value).strip()
        return Boleta(pedido=draft.lines, id=draft.editing_id or '', **fields)

    # =========================================================================
    # BORRADORES
    # =========================================================================

    def new_draft(self) -> BoletaDraft:
        """Borrador vacío para una boleta nueva."""
        return BoletaDraft(self.product_repo, self)

    def edit_draft(self, boleta_id: str) -> Optional[BoletaDraft]:
        """
        Borrador precargado con una boleta existente.

        Args:
            boleta_id: ID de la boleta a editar

        Returns:
            Borrador en modo edición, o None si la boleta no existe
        """
        boleta = self.boleta_repo.get_by_id(boleta_id)
        if boleta is None:
            return None
        return BoletaDraft(self.product_repo, self, editing=boleta)

    def commit(self, draft: BoletaDraft) -> Dict[str, Any]:
        """
        Confirma un borrador en el almacén.
        Si tiene éxito, el borrador queda vacío como uno nuevo.

        Args:
            draft: Borrador a guardar

        Returns:
            Dict con resultado (ok, boleta, error/errors)
        """
        errors = self.validate_header(draft.header)
        if errors:
            return {'ok': False, 'errors': errors}

        if not draft.lines:
            return {'ok': False, 'error': EMPTY_ORDER_MESSAGE}

        candidate = self._build(draft)
        if draft.is_new:
            stored = self.boleta_repo.add(candidate)
        else:
            if not self.boleta_repo.update(candidate):
                return {'ok': False, 'error': 'Boleta no encontrada'}
            stored = self.boleta_repo.get_by_id(candidate.id)

        logger.info(f"Boleta {stored.id} guardada: {len(stored.pedido)} líneas, total {stored.total:.2f}")
        draft.reset()
        return {'ok': True, 'boleta': stored}

    # =========================================================================
    # OPERACIONES DE BOLETAS
    # =========================================================================

    def list_boletas(self) -> List[Boleta]:
        """Obtiene todas las boletas en orden de alta."""
        return self.boleta_repo.get_all()

    def get_boleta(self, boleta_id: str) -> Optional[Boleta]:
        """Obtiene una boleta por su ID."""
        return self.boleta_repo.get_by_id(boleta_id)

    def delete_boleta(self, boleta_id: str) -> Dict[str, Any]:
        """
        Elimina una boleta (no se puede deshacer).

        Returns:
            Dict con ok y deleted (False si no existía)
        """
        return {'ok': True, 'deleted': self.boleta_repo.delete(boleta_id)}

    # =========================================================================
    # TABLA Y DETALLE
    # =========================================================================

    def filter_boletas(self, cliente: str = '', ruc: str = '') -> List[Boleta]:
        """
        Filtra por cliente y RUC (subcadena, sin distinguir mayúsculas).

        Args:
            cliente: Texto a buscar en el cliente
            ruc: Texto a buscar en el RUC

        Returns:
            Boletas que cumplen ambos filtros
        """
        cliente = (cliente or '').lower()
        ruc = (ruc or '').lower()
        return self.boleta_repo.find_all(
            lambda b: cliente in b.cliente.lower() and ruc in b.ruc.lower()
        )

    def get_detail(self, boleta_id: str) -> Optional[Dict[str, Any]]:
        """
        Datos para la vista "Ver Detalles".

        Args:
            boleta_id: ID de la boleta

        Returns:
            Dict con cabecera, líneas con subtotal, total y cantidad de ítems;
            None si la boleta no existe
        """
        boleta = self.boleta_repo.get_by_id(boleta_id)
        if boleta is None:
            return None

        detail = boleta.to_dict()
        detail['pedido'] = [
            dict(line.to_dict(), subtotal=line.subtotal) for line in boleta.pedido
        ]
        detail['total_items'] = sum(line.cantidad for line in boleta.pedido)
        return detail
