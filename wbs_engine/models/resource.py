"""리소스 관리 화면과의 연결에 쓰이는 참조 모델."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class AssigneeRef(BaseModel):
    """
    담당자 식별 정보.

    assignee_id가 있으면 우선 사용하고, 없을 때만 표시 이름(name)으로
    대소문자를 구분하는 정확 일치 검색을 합니다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    assignee_id: Optional[str] = Field(None, description="담당자 식별자")
    name: Optional[str] = Field(None, description="담당자 표시 이름")

    @model_validator(mode="after")
    def _require_identity(self) -> "AssigneeRef":
        if not self.assignee_id and not self.name:
            raise ValueError("assignee_id 또는 name 중 하나는 필요합니다")
        return self
