import threading
from typing import Dict, Iterable, List, Optional, Set

from ..models.task import Task


class TaskStore:
    """任务存储（内存，按插入顺序）"""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._store: Dict[str, Task] = {}
        # 已删除的 ID 不再复用
        self._retired: Set[str] = set()
        self._lock = threading.Lock()
        for task in tasks or ():
            self.add(task)

    def add(self, task: Task) -> Task:
        with self._lock:
            if task.id in self._store or task.id in self._retired:
                raise ValueError(f"任务ID已被使用: {task.id}")
            self._store[task.id] = task
            return task

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            return self._store.get(task_id)

    def list_all(self) -> List[Task]:
        with self._lock:
            return list(self._store.values())

    def set_completed(self, task_id: str, completed: bool) -> Optional[Task]:
        with self._lock:
            task = self._store.get(task_id)
            if task is None:
                return None
            task.completed = completed
            return task

    def delete(self, task_id: str) -> bool:
        with self._lock:
            if task_id in self._store:
                del self._store[task_id]
                self._retired.add(task_id)
                return True
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
