"""Конфигурация построения матриц из литералов."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LiteralConfig:
    """Конфигурация литерального конструктора mat().

    - promote_mixed: смесь int и float в литерале приводится к float;
      при False такая смесь отклоняется (ElementTypeMismatch)
    - schema_name: имя JSON Schema для валидации формы литерала
    """

    promote_mixed: bool = True
    schema_name: str = "matrix_literal"


DEFAULT_LITERAL_CONFIG = LiteralConfig()
