"""Excepciones del motor de matching."""


class PropmateError(Exception):
    """Error base de propmate."""


class InvalidMatchInputError(PropmateError, ValueError):
    """
    El caller pasó un registro sin identidad (cliente o propiedad sin id).

    Es una violación de contrato, distinta de un dato raro que solo
    degrada un subscore.
    """

    def __init__(self, entity: str, detail: str = "missing id"):
        self.entity = entity
        super().__init__(f"Invalid {entity}: {detail}")
