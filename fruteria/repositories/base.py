# ==============================================================================
# REPOSITORIO BASE - Almacén en memoria con copia propia de los registros
# ==============================================================================

import copy
import dataclasses
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


class MemoryRepository(ABC):
    """
    Clase base abstracta para los almacenes en memoria.

    Guarda una lista de entidades (dataclasses con campo ``id``) en orden de
    inserción. Cada instancia tiene su propio lock: todas las lecturas y
    escrituras del almacén quedan serializadas.

    Los registros se copian al entrar y al salir, de modo que quien llama
    solo tiene copias transitorias; el almacén es la única fuente de verdad.

    Reglas de IDs:
    - 'posicional': ID = cantidad actual + 1 (puede repetir un ID ya usado
      si antes se eliminó un registro; se registra un WARNING). Con IDs
      repetidos, get_by_id devuelve el primero; update y delete actúan
      sobre todos.
    - 'secuencial': contador propio que nunca retrocede en la sesión
    """

    ID_SCHEME_POSITIONAL = 'posicional'
    ID_SCHEME_SEQUENTIAL = 'secuencial'
    VALID_ID_SCHEMES = frozenset([ID_SCHEME_POSITIONAL, ID_SCHEME_SEQUENTIAL])

    # Tipo de entidad que acepta el almacén (definido por cada subclase)
    entity_type: type = object
    entity_label: str = 'Registro'

    def __init__(self, id_scheme: str = ID_SCHEME_POSITIONAL):
        """
        Inicializa el almacén vacío.

        Args:
            id_scheme: Esquema de generación de IDs ('posicional' o 'secuencial')

        Raises:
            ValueError: Si el esquema no es válido
        """
        if id_scheme not in self.VALID_ID_SCHEMES:
            raise ValueError(f"Esquema de IDs inválido: {id_scheme!r}")
        self.id_scheme = id_scheme
        self._records: List[Any] = []
        self._issued = 0
        self._lock = threading.RLock()

    @abstractmethod
    def _format_id(self, number: int) -> str:
        """
        Da formato al número de registro.

        Args:
            number: Número correlativo (base 1)

        Returns:
            ID en formato texto
        """
        pass

    def _prepare(self, record: Any) -> Any:
        """
        Ajusta un registro antes de guardarlo (campos derivados).
        Las subclases pueden sobrescribirlo.
        """
        return record

    def _check_type(self, record: Any) -> None:
        if not isinstance(record, self.entity_type):
            raise TypeError(
                f"{type(self).__name__} solo acepta {self.entity_type.__name__}, "
                f"recibió {type(record).__name__}"
            )

    def _index_of(self, record_id: str) -> Optional[int]:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return None

    def _next_id(self) -> str:
        """Genera el siguiente ID según el esquema configurado."""
        if self.id_scheme == self.ID_SCHEME_SEQUENTIAL:
            number = self._issued + 1
        else:
            number = len(self._records) + 1
        self._issued = max(self._issued, number)

        new_id = self._format_id(number)
        if self._index_of(new_id) is not None:
            logger.warning(
                f"{self.entity_label}: el ID generado {new_id} ya existe en el almacén "
                f"(esquema {self.id_scheme})"
            )
        return new_id

    # =========================================================================
    # LECTURA
    # =========================================================================

    def get_all(self) -> List[Any]:
        """
        Obtiene todos los registros en orden de inserción.

        Returns:
            Lista de copias de los registros
        """
        with self._lock:
            return copy.deepcopy(self._records)

    def get_by_id(self, record_id: str) -> Optional[Any]:
        """
        Busca un registro por su ID.

        Args:
            record_id: ID del registro

        Returns:
            Copia del registro o None si no existe
        """
        return self.find_by('id', record_id)

    def find_by(self, field: str, value: Any) -> Optional[Any]:
        """
        Busca el primer registro cuyo campo coincide con el valor.

        Args:
            field: Nombre del campo
            value: Valor a buscar

        Returns:
            Copia del registro o None
        """
        with self._lock:
            for record in self._records:
                if getattr(record, field, None) == value:
                    return copy.deepcopy(record)
        return None

    def find_all(self, predicate: Callable[[Any], bool]) -> List[Any]:
        """
        Filtra registros con una función.

        Args:
            predicate: Función que recibe una copia del registro

        Returns:
            Registros que cumplen el filtro, en orden de inserción
        """
        return [r for r in self.get_all() if predicate(r)]

    def count(self) -> int:
        """Cantidad de registros almacenados."""
        with self._lock:
            return len(self._records)

    # =========================================================================
    # ESCRITURA
    # =========================================================================

    def add(self, candidate: Any) -> Any:
        """
        Agrega un registro nuevo con ID generado por el almacén.
        Cualquier ID que traiga el candidato se ignora. No valida campos:
        eso es responsabilidad del formulario.

        Args:
            candidate: Entidad a agregar

        Returns:
            Copia del registro guardado (con su ID)
        """
        self._check_type(candidate)
        with self._lock:
            new_id = self._next_id()
            stored = self._prepare(dataclasses.replace(copy.deepcopy(candidate), id=new_id))
            self._records.append(stored)
            logger.info(f"{self.entity_label} {new_id} agregado")
            return copy.deepcopy(stored)

    def update(self, record: Any) -> bool:
        """
        Reemplaza todos los registros con el mismo ID.
        Si no existe ninguno no hace nada (no es un error).

        Args:
            record: Registro completo con sus nuevos valores

        Returns:
            True si se reemplazó alguno, False si el ID no existía
        """
        self._check_type(record)
        with self._lock:
            matches = [i for i, r in enumerate(self._records) if r.id == record.id]
            if not matches:
                logger.debug(f"{self.entity_label} {record.id} no existe; actualización ignorada")
                return False
            for index in matches:
                self._records[index] = self._prepare(copy.deepcopy(record))
            logger.info(f"{self.entity_label} {record.id} actualizado")
            return True

    def delete(self, record_id: str) -> bool:
        """
        Elimina todos los registros con el ID indicado.
        Si no existe ninguno no hace nada (no es un error).

        Args:
            record_id: ID del registro

        Returns:
            True si se eliminó alguno, False si no existía
        """
        with self._lock:
            remaining = [r for r in self._records if r.id != record_id]
            if len(remaining) == len(self._records):
                logger.debug(f"{self.entity_label} {record_id} no existe; eliminación ignorada")
                return False
            self._records = remaining
            logger.info(f"{self.entity_label} {record_id} eliminado")
            return True

    def clear(self) -> None:
        """Vacía el almacén y reinicia el contador de IDs."""
        with self._lock:
            self._records = []
            self._issued = 0
