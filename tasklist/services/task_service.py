import logging
from typing import List

from ..exceptions import TaskNotFoundError
from ..models.task import Task, TaskCompletionUpdate, TaskCreate
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> List[Task]:
        """返回全部任务（插入顺序）"""
        tasks = self.store.list_all()
        logger.info(f"返回全部任务: {len(tasks)} 条")
        return tasks

    def create_task(self, request: TaskCreate) -> Task:
        """创建任务，由服务端分配 ID"""
        task = self.store.add(Task(text=request.text))
        logger.info(f"任务已创建: {task.id}")
        return task

    def set_completion(self, task_id: str, request: TaskCompletionUpdate) -> Task:
        """仅修改任务的完成状态"""
        task = self.store.set_completed(task_id, request.completed)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"任务 {task_id} 完成状态更新为: {request.completed}")
        return task

    def delete_task(self, task_id: str) -> None:
        """永久删除任务"""
        if not self.store.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"任务已删除: {task_id}")
