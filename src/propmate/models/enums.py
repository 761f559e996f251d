"""
Enumeraciones cerradas del dominio.

Los valores coinciden con los strings que guarda el CRM, así un export
JSON se valida sin transformaciones. parse() es tolerante: devuelve None
para valores desconocidos en lugar de fallar.
"""

import re
from enum import Enum
from typing import Any, Optional


def _key(value: str) -> str:
    return re.sub(r"[\s_\-]+", "", value).lower()


class _ParsableEnum(str, Enum):
    """Enum de strings con parseo tolerante a mayúsculas y espacios."""

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {}

    @classmethod
    def parse(cls, value: Any) -> Optional["_ParsableEnum"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        key = _key(value)
        for member in cls:
            if key in (_key(member.value), _key(member.name)):
                return member
        return cls._aliases().get(key)


class PropertyType(_ParsableEnum):
    FLAT = "Flat"
    VILLA = "Villa"
    COMMERCIAL = "Commercial"
    PLOT = "Plot"


class TransactionType(_ParsableEnum):
    RENT = "Rent"
    SALE = "Sale"
    LEASE = "Lease"


class PropertyStatus(_ParsableEnum):
    AVAILABLE = "Available"
    ON_HOLD = "On Hold"
    RENTED = "Rented"
    SOLD = "Sold"


class LeadStage(_ParsableEnum):
    NEW = "New"
    CONTACTED = "Contacted"
    SHARED = "Shared"
    SITE_VISIT = "Site Visit"
    NEGOTIATION = "Negotiation"
    CLOSED = "Closed"
    LOST = "Lost"


class MaritalStatus(_ParsableEnum):
    MARRIED = "Married"
    BACHELOR = "Bachelor"

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {"single": cls.BACHELOR}


class FurnishingStatus(_ParsableEnum):
    """
    Nivel de amoblamiento. ANY es el comodín del cliente ("me da igual")
    y no tiene lugar en la escala ordinal.
    """

    FULLY = "Fully"
    SEMI = "Semi"
    UNFURNISHED = "Unfurnished"
    ANY = "Any"

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {
            "full": cls.FULLY,
            "furnished": cls.FULLY,
            "fullyfurnished": cls.FULLY,
            "semifurnished": cls.SEMI,
            "none": cls.UNFURNISHED,
            "nopreference": cls.ANY,
        }

    @property
    def level(self) -> Optional[int]:
        """Posición ordinal (Unfurnished=0, Semi=1, Fully=2); None para ANY."""
        return _FURNISHING_LEVELS.get(self)


_FURNISHING_LEVELS = {
    FurnishingStatus.UNFURNISHED: 0,
    FurnishingStatus.SEMI: 1,
    FurnishingStatus.FULLY: 2,
}


_BHK_PATTERN = re.compile(r"^(\d+)(rk|bhk|bk)$")


class Bhk(_ParsableEnum):
    """
    Configuración de ambientes, en el orden canónico de tamaño.
    Todo lo que tenga 5 o más dormitorios cae en FIVE_PLUS.
    """

    ONE_RK = "1RK"
    ONE = "1BHK"
    TWO = "2BHK"
    THREE = "3BHK"
    FOUR = "4BHK"
    FIVE_PLUS = "5BHK+"

    @classmethod
    def parse(cls, value: Any) -> Optional["Bhk"]:
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            value = f"{value}BHK"
        if not isinstance(value, str):
            return None
        key = _key(value).rstrip("+")
        if key.isdigit():
            key += "bhk"
        match = _BHK_PATTERN.match(key)
        if not match:
            return None
        count = int(match.group(1))
        if match.group(2) == "rk":
            return cls.ONE_RK if count == 1 else None
        if count < 1:
            return None
        if count >= 5:
            return cls.FIVE_PLUS
        return _BHK_ORDER[count]

    @property
    def rank(self) -> int:
        """Índice en la escala canónica (1RK=0 ... 5BHK+=5)."""
        return _BHK_ORDER.index(self)


_BHK_ORDER = [
    Bhk.ONE_RK,
    Bhk.ONE,
    Bhk.TWO,
    Bhk.THREE,
    Bhk.FOUR,
    Bhk.FIVE_PLUS,
]
