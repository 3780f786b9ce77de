"""通用响应模型"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """对外字段使用 camelCase，内部仍用 snake_case"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    """通用操作结果"""

    success: bool = True
    message: str
