import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..exceptions import RequestFailedError, TransportError
from ..models.task import TaskRecord

logger = logging.getLogger(__name__)

_task_list = TypeAdapter(List[TaskRecord])


def _error_message(response: httpx.Response) -> str:
    """提取服务端返回的 {"error": ...}，没有则使用状态码描述"""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP error! status: {response.status_code}"


class TaskApiClient:
    """任务接口的 HTTP 客户端，不做自动重试"""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None):
        if client is None:
            kwargs = {}
            # 未配置时使用 httpx 默认超时
            if settings.request_timeout is not None:
                kwargs["timeout"] = settings.request_timeout
            client = httpx.Client(base_url=base_url or settings.api_url, **kwargs)
        self._client = client

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} 请求失败: {e}") from e

        if response.is_error:
            raise RequestFailedError(response.status_code, _error_message(response))
        return response

    def list_tasks(self) -> List[TaskRecord]:
        response = self._request("GET", "/tasks")
        try:
            return _task_list.validate_json(response.content)
        except ValidationError as e:
            raise TransportError("任务列表响应格式错误") from e

    def create_task(self, text: str) -> TaskRecord:
        response = self._request("POST", "/tasks", json={"text": text})
        return self._parse_task(response)

    def update_task(self, task_id: str, completed: bool) -> TaskRecord:
        response = self._request("PUT", f"/tasks/{task_id}", json={"completed": completed})
        return self._parse_task(response)

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    @staticmethod
    def _parse_task(response: httpx.Response) -> TaskRecord:
        try:
            return TaskRecord.model_validate_json(response.content)
        except ValidationError as e:
            raise TransportError("任务响应格式错误") from e
