"""쿼리 결과 행을 DTO로 변환하는 프로젝션 유틸리티.

Projection utilities mapping query result rows into Pydantic DTOs.

Two styles are supported:
    - project_fields: 컬럼 라벨과 DTO 필드명을 매칭 (match column labels to field names).
      A label the DTO does not declare is ignored and an unmatched field keeps
      its default, so ``Member.username`` projected into ``UserDto`` leaves
      ``name`` as None until the column is labelled ``name``.
    - project_constructor: 컬럼 순서대로 DTO 필드에 대입 (assign by position,
      ignoring labels). The column count must equal the DTO field count.
"""

from typing import Any, Iterable, TypeVar

from pydantic import BaseModel
from sqlalchemy import Row

DtoType = TypeVar("DtoType", bound=BaseModel)


def project_fields(dto_class: type[DtoType], rows: Iterable[Row[Any]]) -> list[DtoType]:
    """라벨 기준으로 행을 DTO로 변환합니다.

    Map each row into ``dto_class`` by column label.
    """
    return [dto_class.model_validate(dict(row._mapping)) for row in rows]


def project_constructor(dto_class: type[DtoType], rows: Iterable[Row[Any]]) -> list[DtoType]:
    """위치 기준으로 행을 DTO로 변환합니다.

    Map each row into ``dto_class`` by column position.

    Raises:
        ValueError: 컬럼 수와 DTO 필드 수가 다를 때 (Column/field count mismatch)
    """
    field_names: list[str] = list(dto_class.model_fields)
    dtos: list[DtoType] = []
    for row in rows:
        values = tuple(row)
        if len(values) != len(field_names):
            raise ValueError(
                f"{dto_class.__name__} expects {len(field_names)} columns, got {len(values)}"
            )
        dtos.append(dto_class.model_validate(dict(zip(field_names, values))))
    return dtos
