import httpx
import pytest
from fastapi.testclient import TestClient

from tasklist.client.api import TaskApiClient
from tasklist.main import create_app
from tasklist.models.task import seed_tasks
from tasklist.storage.task_store import TaskStore


class FakeClock:
    """可手动推进的时钟"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(seed_tasks())


@pytest.fixture()
def client(store: TaskStore) -> TestClient:
    return TestClient(create_app(store))


@pytest.fixture()
def api(client: TestClient) -> TaskApiClient:
    """直接连接到测试应用的 API 客户端"""
    return TaskApiClient(client=client)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def offline_api() -> TaskApiClient:
    """所有请求都以连接失败结束的 API 客户端"""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return TaskApiClient(client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://test"))
