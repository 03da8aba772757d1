"""
客户端视图状态与纯函数归约

每个函数接收上一个视图状态和一次服务端结果，返回新的视图状态，
不做任何 I/O。渲染与网络请求由 sync / render 模块负责。
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..models.task import TaskRecord


@dataclass(frozen=True)
class Banner:
    """临时错误提示，到期后自动隐藏"""
    message: str
    expires_at: float


@dataclass(frozen=True)
class ViewState:
    tasks: Tuple[TaskRecord, ...] = ()
    loading: bool = True
    banner: Optional[Banner] = None

    @property
    def is_empty(self) -> bool:
        return not self.loading and not self.tasks

    def find(self, task_id: str) -> Optional[TaskRecord]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None


def tasks_loaded(state: ViewState, tasks: Iterable[TaskRecord]) -> ViewState:
    return replace(state, tasks=tuple(tasks), loading=False)


def task_added(state: ViewState, task: TaskRecord) -> ViewState:
    return replace(state, tasks=state.tasks + (task,))


def task_updated(state: ViewState, task: TaskRecord) -> ViewState:
    """只更新对应任务的完成状态；视图中不存在该任务时保持不变"""
    if state.find(task.id) is None:
        return state
    tasks = tuple(
        t.model_copy(update={"completed": task.completed}) if t.id == task.id else t
        for t in state.tasks
    )
    return replace(state, tasks=tasks)


def task_removed(state: ViewState, task_id: str) -> ViewState:
    if state.find(task_id) is None:
        return state
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))


def error_raised(state: ViewState, message: str, now: float, delay: float) -> ViewState:
    return replace(state, banner=Banner(message=message, expires_at=now + delay))


def banner_expired(state: ViewState, now: float) -> ViewState:
    if state.banner is not None and now >= state.banner.expires_at:
        return replace(state, banner=None)
    return state
