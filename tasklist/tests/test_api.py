"""任务接口测试"""

import pytest


class TestListTasks:
    """测试列出任务"""

    def test_seeded_tasks(self, client):
        """测试启动时预置三个示例任务"""
        response = client.get("/tasks")
        assert response.status_code == 200
        tasks = response.json()
        assert [t["id"] for t in tasks] == ["1", "2", "3"]
        assert [t["completed"] for t in tasks] == [True, True, False]

    def test_cors_allows_any_origin(self, client):
        """测试跨域请求被允许"""
        response = client.get("/tasks", headers={"Origin": "http://localhost:8080"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_preflight(self, client):
        """测试跨域预检请求"""
        response = client.options(
            "/tasks/1",
            headers={
                "Origin": "http://localhost:8080",
                "Access-Control-Request-Method": "PUT",
            },
        )
        assert response.status_code == 200
        assert "PUT" in response.headers["access-control-allow-methods"]


class TestCreateTask:
    """测试创建任务"""

    def test_create_trims_text(self, client):
        """测试创建任务时去除首尾空白"""
        response = client.post("/tasks", json={"text": "  buy milk  "})
        assert response.status_code == 201
        task = response.json()
        assert task["text"] == "buy milk"
        assert task["completed"] is False
        assert task["id"] not in ("1", "2", "3")

        listed = client.get("/tasks").json()
        assert listed[-1] == task

    def test_created_ids_are_unique(self, client):
        """测试每次创建都分配新的 ID"""
        ids = {client.post("/tasks", json={"text": f"task {i}"}).json()["id"] for i in range(20)}
        assert len(ids) == 20

    def test_ignores_client_supplied_fields(self, client):
        """测试忽略客户端提交的 id 与 completed"""
        task = client.post("/tasks", json={"text": "x", "id": "1", "completed": True}).json()
        assert task["id"] != "1"
        assert task["completed"] is False

    @pytest.mark.parametrize("body", [
        {"text": ""},
        {"text": "   "},
        {},
        {"text": None},
        {"text": 42},
        {"text": ["a"]},
        ["text"],
    ])
    def test_invalid_text_rejected(self, client, store, body):
        """测试缺失、非字符串或空白文本返回 400 且不改变任务数"""
        response = client.post("/tasks", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Task text is required and must be a non-empty string."}
        assert len(store) == 3

    def test_missing_body_rejected(self, client, store):
        """测试没有请求体时返回 400"""
        response = client.post("/tasks")
        assert response.status_code == 400
        assert "error" in response.json()
        assert len(store) == 3

    def test_malformed_json_rejected(self, client, store):
        """测试非法 JSON 返回 400"""
        response = client.post(
            "/tasks",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be valid JSON."}
        assert len(store) == 3


class TestUpdateTask:
    """测试更新完成状态"""

    def test_set_completion(self, client):
        """测试只修改 completed 字段"""
        response = client.put("/tasks/3", json={"completed": True})
        assert response.status_code == 200
        assert response.json() == {"id": "3", "text": "Add a new task with the add command", "completed": True}

    def test_toggle_round_trip(self, client):
        """测试 true 再 false 恢复原始状态"""
        original = client.get("/tasks").json()
        client.put("/tasks/3", json={"completed": True})
        client.put("/tasks/3", json={"completed": False})
        assert client.get("/tasks").json() == original

    def test_unknown_id(self, client):
        """测试未知 ID 返回 404"""
        response = client.put("/tasks/999", json={"completed": True})
        assert response.status_code == 404
        assert response.json() == {"error": "Task not found."}

    @pytest.mark.parametrize("body", [{}, {"completed": "true"}, {"completed": 1}, {"completed": None}])
    def test_non_boolean_rejected(self, client, body):
        """测试非布尔值返回 400"""
        response = client.put("/tasks/1", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "`completed` field must be a boolean."}
        assert client.get("/tasks").json()[0]["completed"] is True

    def test_validation_checked_before_lookup(self, client):
        """测试未知 ID 且参数非法时优先返回 400"""
        response = client.put("/tasks/999", json={"completed": "yes"})
        assert response.status_code == 400


class TestDeleteTask:
    """测试删除任务"""

    def test_delete(self, client):
        """测试删除返回 204 且列表减少一项"""
        response = client.delete("/tasks/1")
        assert response.status_code == 204
        assert response.content == b""

        tasks = client.get("/tasks").json()
        assert len(tasks) == 2
        assert "1" not in [t["id"] for t in tasks]

    def test_delete_twice(self, client):
        """测试重复删除返回 404"""
        client.delete("/tasks/2")
        response = client.delete("/tasks/2")
        assert response.status_code == 404
        assert response.json() == {"error": "Task not found."}

    def test_deleted_task_cannot_be_updated(self, client):
        """测试已删除的任务无法更新"""
        client.delete("/tasks/3")
        response = client.put("/tasks/3", json={"completed": True})
        assert response.status_code == 404


class TestSystemRoutes:
    """测试系统接口"""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client):
        body = client.get("/").json()
        assert "version" in body

    def test_unknown_route_uses_error_shape(self, client):
        """测试框架错误也使用 {error} 结构"""
        response = client.get("/nope")
        assert response.status_code == 404
        assert "error" in response.json()
