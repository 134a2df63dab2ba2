from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")

class PageResult(BaseModel, Generic[T]):
    """分页结果

    page_size 为 -1 时表示不分页，total 即返回的记录数。
    """
    records: List[T] = Field(default_factory=list, description="当前页记录")
    total: int = Field(0, description="总记录数")
    page_size: int = Field(..., description="每页数量")
    current_page: int = Field(..., description="当前页码")
