import uuid
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator

from ..exceptions import TaskValidationError

CREATE_ERROR = "Task text is required and must be a non-empty string."
COMPLETION_ERROR = "`completed` field must be a boolean."

ModelT = TypeVar("ModelT", bound=BaseModel)


class Task(BaseModel):
    """任务模型"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="任务ID")
    text: str = Field(..., description="任务内容")
    completed: bool = Field(default=False, description="是否已完成")


class TaskRecord(BaseModel):
    """服务端返回的任务记录（客户端解析用，所有字段必填）"""
    id: StrictStr
    text: StrictStr
    completed: StrictBool


class TaskCreate(BaseModel):
    """创建任务请求"""
    text: StrictStr = Field(..., description="任务内容（去除首尾空白后不能为空）")

    @field_validator("text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("text must not be blank")
        return value


class TaskCompletionUpdate(BaseModel):
    """更新完成状态请求"""
    completed: StrictBool = Field(..., description="新的完成状态")


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str


def parse_payload(model: Type[ModelT], payload: Any, message: str) -> ModelT:
    """将原始请求体解析为类型化模型，失败时抛出 TaskValidationError"""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise TaskValidationError(message) from e


def seed_tasks() -> List[Task]:
    """启动时预置的三个示例任务"""
    return [
        Task(id="1", text="Start the server with tasklist-server", completed=True),
        Task(id="2", text="Connect with the tasklist client", completed=True),
        Task(id="3", text="Add a new task with the add command", completed=False),
    ]
