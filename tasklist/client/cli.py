"""终端任务列表客户端"""
import argparse
import sys
from typing import Optional, TextIO

from ..config import settings
from .api import TaskApiClient
from .render import render_view
from .sync import TaskListController

PROMPT = "> "
USAGE = """命令:
    add <text>   新建任务
    done <n>     切换第 n 个任务的完成状态
    rm <n>       删除第 n 个任务
    ls           重新从服务端加载
    quit         退出"""


def _task_id_at(controller: TaskListController, arg: str) -> Optional[str]:
    """将用户输入的序号转换为任务 ID"""
    if not arg.isdigit():
        return None
    index = int(arg) - 1
    tasks = controller.state.tasks
    if 0 <= index < len(tasks):
        return tasks[index].id
    return None


def handle_command(controller: TaskListController, line: str, out: TextIO) -> bool:
    """执行一条命令，返回 False 表示退出"""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()

    if command in ("quit", "q", "exit"):
        return False
    if command == "add":
        controller.add(arg)
    elif command in ("done", "rm"):
        task_id = _task_id_at(controller, arg.strip())
        if task_id is None:
            print(f"无效的任务序号: {arg.strip() or '(空)'}", file=out)
            return True
        if command == "done":
            controller.toggle(task_id)
        else:
            controller.remove(task_id)
    elif command == "ls":
        controller.load()
    elif command:
        print(USAGE, file=out)
        return True

    print(render_view(controller.state), file=out)
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tasklist", description="终端任务列表客户端")
    parser.add_argument("--api-url", default=settings.api_url, help="任务服务地址")
    args = parser.parse_args(argv)

    api = TaskApiClient(base_url=args.api_url)
    controller = TaskListController(api)
    try:
        print(render_view(controller.load()))
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                break
            if not handle_command(controller, line, sys.stdout):
                break
    except KeyboardInterrupt:
        pass
    finally:
        api.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
