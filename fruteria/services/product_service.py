# ==============================================================================
# SERVICIO DE PRODUCTOS
# ==============================================================================
# Validación del formulario de productos y filtros de la tabla del catálogo.
# El almacén no valida nada: todo se revisa aquí antes de llamarlo.
# ==============================================================================

import dataclasses
import math
from typing import Any, Dict, List, Optional, Tuple

from fruteria.models import Categoria, Product
from fruteria.repositories import IProductRepository


def _parse_bound(value: Any) -> Optional[float]:
    """Convierte un filtro de precio; vacío → sin filtro, inválido → NaN."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


class ProductService:
    """
    Servicio para gestión del catálogo.

    Responsabilidades:
    - Validar datos de formulario (nombre, categoría, precio)
    - Crear, editar y eliminar productos a través del almacén
    - Filtrar la tabla por categoría y rango de precio
    """

    def __init__(self, product_repo: IProductRepository):
        """
        Inicializa el servicio de productos.

        Args:
            product_repo: Almacén de productos
        """
        self.product_repo = product_repo

    # =========================================================================
    # VALIDACIÓN
    # =========================================================================

    def validate(self, data: Dict[str, Any]) -> Dict[str, str]:
        """
        Valida los datos del formulario de producto.

        Args:
            data: Dict con nombre, categoria, precio

        Returns:
            Dict {campo: mensaje}; vacío si todo es válido
        """
        errors = {}

        nombre = data.get('nombre')
        if not nombre or not str(nombre).strip():
            errors['nombre'] = 'El nombre es requerido'

        precio = data.get('precio')
        if precio is None or (isinstance(precio, str) and not precio.strip()):
            errors['precio'] = 'El precio es requerido'
        else:
            try:
                value = float(precio)
                if not math.isfinite(value):
                    raise ValueError()
                if value < 0:
                    errors['precio'] = 'El precio no puede ser negativo'
            except (TypeError, ValueError):
                errors['precio'] = 'El precio debe ser un número válido'

        categoria = data.get('categoria') or Categoria.FRUTA
        try:
            Categoria(categoria)
        except ValueError:
            errors['categoria'] = 'Categoría inválida'

        return errors

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'nombre': str(data['nombre']).strip(),
            'categoria': Categoria(data.get('categoria') or Categoria.FRUTA),
            'precio': round(float(data['precio']), 2),
        }

    # =========================================================================
    # OPERACIONES DE PRODUCTOS
    # =========================================================================

    def list_products(self) -> List[Product]:
        """Obtiene todos los productos en orden de alta."""
        return self.product_repo.get_all()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Obtiene un producto por su ID."""
        return self.product_repo.get_by_id(product_id)

    def create_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crea un producto desde el formulario.

        Args:
            data: Dict con nombre, categoria, precio

        Returns:
            Dict con resultado (ok, producto, errors)
        """
        errors = self.validate(data)
        if errors:
            return {'ok': False, 'errors': errors}

        product = self.product_repo.add(Product(**self._clean(data)))
        return {'ok': True, 'producto': product}

    def update_product(self, product_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Guarda los cambios del formulario de edición.

        Args:
            product_id: ID del producto a editar
            data: Dict con nombre, categoria, precio

        Returns:
            Dict con resultado (ok, producto, error/errors)
        """
        existing = self.product_repo.get_by_id(product_id)
        if existing is None:
            return {'ok': False, 'error': 'Producto no encontrado'}

        errors = self.validate(data)
        if errors:
            return {'ok': False, 'errors': errors}

        updated = dataclasses.replace(existing, **self._clean(data))
        if not self.product_repo.update(updated):
            return {'ok': False, 'error': 'Producto no encontrado'}
        return {'ok': True, 'producto': updated}

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        """
        Elimina un producto. Las boletas que lo incluyen no cambian.

        Returns:
            Dict con ok y deleted (False si no existía)
        """
        return {'ok': True, 'deleted': self.product_repo.delete(product_id)}

    # =========================================================================
    # TABLA
    # =========================================================================

    def filter_products(
        self,
        categoria: Any = None,
        precio_min: Any = None,
        precio_max: Any = None
    ) -> List[Product]:
        """
        Filtra el catálogo como la tabla de productos.

        Args:
            categoria: Categoría exacta ('' o None = todas)
            precio_min: Precio mínimo inclusivo ('' o None = sin límite)
            precio_max: Precio máximo inclusivo ('' o None = sin límite)

        Returns:
            Productos que cumplen todos los filtros. Un límite de precio
            que no es número no deja pasar ningún producto.
        """
        if categoria:
            try:
                products = self.product_repo.get_by_categoria(Categoria(categoria))
            except ValueError:
                return []
        else:
            products = self.product_repo.get_all()

        low = _parse_bound(precio_min)
        high = _parse_bound(precio_max)

        # Comparaciones escritas en positivo: con NaN ambas son False
        return [
            p for p in products
            if (low is None or p.precio >= low) and (high is None or p.precio <= high)
        ]

    def options(self) -> List[Tuple[str, str]]:
        """
        Opciones para el selector de productos de una boleta.

        Returns:
            Lista de (id, "Nombre ($precio)")
        """
        return [(p.id, f"{p.nombre} (${p.precio:.2f})") for p in self.product_repo.get_all()]
