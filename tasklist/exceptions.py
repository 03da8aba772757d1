"""任务列表自定义异常"""


class TaskListError(Exception):
    """任务列表基础异常"""
    pass


class TaskValidationError(TaskListError):
    """请求参数校验失败"""
    pass


class TaskNotFoundError(TaskListError):
    """任务不存在"""

    def __init__(self, task_id: str, message: str = "Task not found."):
        super().__init__(message)
        self.task_id = task_id


class ClientError(TaskListError):
    """客户端请求失败基础异常"""
    pass


class TransportError(ClientError):
    """网络/连接失败，或响应无法解析"""
    pass


class RequestFailedError(ClientError):
    """服务端返回非 2xx 状态码"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
