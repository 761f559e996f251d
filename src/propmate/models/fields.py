"""
Tipos de campo tolerantes para los registros del CRM.

Los datos vienen cargados a mano por agentes: un precio con comas, una
fecha mal tipeada o un BHK escrito "2 bhk". En vez de rechazar el
registro entero, el valor ilegible se convierte en None y el motor lo
trata como el peor caso del criterio correspondiente.
"""

import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Annotated, Any, Callable, Optional

from pydantic import BeforeValidator

from propmate.models.enums import Bhk, FurnishingStatus

_TRUE_STRINGS = {"true", "yes", "y", "1", "si"}


def to_float(value: Any) -> Optional[float]:
    """Convierte a float; None si no es un número finito."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ""))
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def to_int(value: Any) -> Optional[int]:
    number = to_float(value)
    if number is None:
        return None
    return int(number)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Parsea timestamps ISO. Los naive se asumen UTC para poder
    compararlos con los que traen zona horaria.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_date(value: Any) -> Optional[date]:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = to_datetime(value)
    return parsed.date() if parsed else None


def to_identity(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _enum_list(parser: Callable[[Any], Any]) -> Callable[[Any], list]:
    def parse_all(value: Any) -> list:
        if value is None:
            return []
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            value = [value]
        parsed = []
        for item in value:
            member = parser(item)
            if member is not None and member not in parsed:
                parsed.append(member)
        return parsed

    return parse_all


def _text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        value = [value]
    return [str(item) for item in value if item is not None and str(item).strip()]


Identity = Annotated[Optional[str], BeforeValidator(to_identity)]
LenientFloat = Annotated[Optional[float], BeforeValidator(to_float)]
LenientInt = Annotated[Optional[int], BeforeValidator(to_int)]
LenientBool = Annotated[bool, BeforeValidator(to_bool)]
LenientDate = Annotated[Optional[date], BeforeValidator(to_date)]
LenientDatetime = Annotated[Optional[datetime], BeforeValidator(to_datetime)]
Text = Annotated[str, BeforeValidator(to_text)]
TextList = Annotated[list[str], BeforeValidator(_text_list)]

BhkField = Annotated[Optional[Bhk], BeforeValidator(Bhk.parse)]
BhkList = Annotated[list[Bhk], BeforeValidator(_enum_list(Bhk.parse))]
FurnishingField = Annotated[
    Optional[FurnishingStatus], BeforeValidator(FurnishingStatus.parse)
]
FurnishingList = Annotated[
    list[FurnishingStatus], BeforeValidator(_enum_list(FurnishingStatus.parse))
]


def to_location(value: Any) -> Any:
    """Una ubicación que no es un objeto se trata como vacía."""
    if isinstance(value, Mapping) or hasattr(value, "model_dump"):
        return value
    return {}


def lenient_enum(enum_cls) -> BeforeValidator:
    """Validator que parsea un enum del dominio o deja None."""
    return BeforeValidator(enum_cls.parse)
