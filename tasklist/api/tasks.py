from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response

from ..models.task import (
    COMPLETION_ERROR,
    CREATE_ERROR,
    ErrorResponse,
    Task,
    TaskCompletionUpdate,
    TaskCreate,
    parse_payload,
)
from ..services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["任务管理"])


def get_task_service(request: Request) -> TaskService:
    """应用持有的任务服务实例"""
    return request.app.state.task_service


@router.get(
    "",
    response_model=List[Task],
    summary="列出所有任务",
    description="按创建顺序返回全部任务"
)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    return service.list_tasks()


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    responses={400: {"model": ErrorResponse}},
)
async def create_task(
    payload: Any = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """
    创建新任务

    - **text**: 任务内容，去除首尾空白后不能为空
    - 返回包含服务端分配 ID 的完整任务
    """
    request = parse_payload(TaskCreate, payload, CREATE_ERROR)
    return service.create_task(request)


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="更新完成状态",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_task(
    task_id: str,
    payload: Any = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """
    更新任务完成状态

    - **task_id**: 任务唯一标识符
    - **completed**: 必须为布尔值
    """
    request = parse_payload(TaskCompletionUpdate, payload, COMPLETION_ERROR)
    return service.set_completion(task_id, request)


@router.delete(
    "/{task_id}",
    status_code=204,
    summary="删除任务",
    responses={404: {"model": ErrorResponse}},
)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return Response(status_code=204)
