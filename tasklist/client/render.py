from typing import List

from .view import ViewState

EMPTY_PLACEHOLDER = "No tasks yet. Add one above!"
LOADING = "Loading tasks..."


def render_view(state: ViewState) -> str:
    """将视图状态渲染为终端文本"""
    lines: List[str] = []
    if state.banner is not None:
        lines.append(f"! {state.banner.message}")

    if state.loading:
        lines.append(LOADING)
    elif not state.tasks:
        lines.append(EMPTY_PLACEHOLDER)
    else:
        for index, task in enumerate(state.tasks, start=1):
            mark = "x" if task.completed else " "
            lines.append(f"{index:>2}. [{mark}] {task.text}")

    return "\n".join(lines)
