import logging
import time
from typing import Callable, Optional

from ..config import settings
from ..exceptions import ClientError
from . import view
from .api import TaskApiClient

logger = logging.getLogger(__name__)

LOAD_ERROR = "Could not connect to the server to fetch tasks."
ADD_ERROR = "Failed to add the new task. Please try again."
UPDATE_ERROR = "Could not update the task. Please refresh and try again."
DELETE_ERROR = "Could not delete the task. Please refresh and try again."


class TaskListController:
    """
    客户端同步层

    只有在服务端返回成功后才修改本地视图；请求失败时保留
    最后一次正确的列表并显示临时错误提示。
    """

    def __init__(
        self,
        api: TaskApiClient,
        clock: Callable[[], float] = time.monotonic,
        banner_seconds: Optional[float] = None,
    ):
        self.api = api
        self.clock = clock
        self.banner_seconds = settings.error_banner_seconds if banner_seconds is None else banner_seconds
        self._state = view.ViewState()

    @property
    def state(self) -> view.ViewState:
        self._state = view.banner_expired(self._state, self.clock())
        return self._state

    def _fail(self, message: str, error: ClientError) -> None:
        logger.error(f"{message} ({error})", exc_info=error)
        self._state = view.error_raised(self._state, message, self.clock(), self.banner_seconds)

    def load(self) -> view.ViewState:
        """
        加载任务列表

        首次加载失败时显示错误并渲染空列表；之后的重新加载失败时
        保留已显示的列表，只显示错误提示。
        """
        try:
            tasks = self.api.list_tasks()
        except ClientError as e:
            self._fail(LOAD_ERROR, e)
            if self._state.loading:
                self._state = view.tasks_loaded(self._state, [])
            return self.state
        self._state = view.tasks_loaded(self._state, tasks)
        return self.state

    def add(self, text: str) -> bool:
        text = text.strip()
        if not text:
            return False
        try:
            task = self.api.create_task(text)
        except ClientError as e:
            self._fail(ADD_ERROR, e)
            return False
        self._state = view.task_added(self._state, task)
        return True

    def toggle(self, task_id: str) -> bool:
        """提交当前完成状态的取反值"""
        current = self._state.find(task_id)
        if current is None:
            return False
        try:
            task = self.api.update_task(task_id, not current.completed)
        except ClientError as e:
            self._fail(UPDATE_ERROR, e)
            return False
        self._state = view.task_updated(self._state, task)
        return True

    def remove(self, task_id: str) -> bool:
        try:
            self.api.delete_task(task_id)
        except ClientError as e:
            self._fail(DELETE_ERROR, e)
            return False
        self._state = view.task_removed(self._state, task_id)
        return True
