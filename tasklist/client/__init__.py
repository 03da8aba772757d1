"""任务列表客户端同步层"""

from .api import TaskApiClient
from .render import render_view
from .sync import TaskListController
from .view import Banner, ViewState

__all__ = ["TaskApiClient", "TaskListController", "ViewState", "Banner", "render_view"]
