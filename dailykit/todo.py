"""A to-do list kept in a JSON file, with an interactive menu."""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable

DEFAULT_PATH = "tasks.json"

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF
_NO_TASKS = "❌ No tasks available."
_MENU = (
    "\nTo-Do List Menu:",
    "1. Add Task",
    "2. View Tasks",
    "3. Mark as Complete",
    "4. Delete Task",
    "5. Exit",
)


@dataclass
class Task:
    """One entry of the list."""

    id: int
    description: str
    completed: bool = False

    @classmethod
    def from_dict(cls, data: object) -> "Task":
        """Build a task from decoded JSON; raise ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError("a task must be a JSON object")
        try:
            task_id = data["id"]
            description = data["description"]
            completed = data["completed"]
        except KeyError as err:
            raise ValueError(f"task is missing field {err.args[0]!r}") from None
        if (
            isinstance(task_id, bool)
            or not isinstance(task_id, int)
            or not 0 <= task_id <= _U32_MAX
        ):
            raise ValueError(f"invalid task id: {task_id!r}")
        if not isinstance(description, str):
            raise ValueError("task description must be a string")
        if not isinstance(completed, bool):
            raise ValueError("task completion must be a boolean")
        return cls(id=task_id, description=description, completed=completed)


class TaskNotFoundError(LookupError):
    """No task carries the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


@dataclass
class TodoList:
    """An ordered collection of tasks."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def _find(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def add(self, description: str) -> Task:
        """Append a task; its id is one more than the number of tasks before it."""
        task = Task(id=len(self.tasks) + 1, description=description.strip())
        self.tasks.append(task)
        return task

    def complete(self, task_id: int) -> Task:
        """Mark the first task with ``task_id`` as done."""
        task = self._find(task_id)
        task.completed = True
        return task

    def delete(self, task_id: int) -> Task:
        """Remove the first task with ``task_id`` and return it."""
        task = self._find(task_id)
        self.tasks.remove(task)
        return task

    def render(self) -> str:
        """The list as shown to the user, one task per line."""
        if not self.tasks:
            return _NO_TASKS
        return "\n".join(
            f"{task.id} [{'✅' if task.completed else '❌'}] {task.description}"
            for task in self.tasks
        )

    def to_json(self) -> str:
        """Pretty-printed JSON array of the tasks."""
        return json.dumps(
            [asdict(task) for task in self.tasks], indent=2, ensure_ascii=False
        )

    @classmethod
    def from_json(cls, text: str) -> "TodoList":
        """Parse a JSON array of tasks; raise ValueError if it is malformed."""
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("the task file must hold a JSON array")
        return cls(tasks=[Task.from_dict(item) for item in data])


def load_tasks(path: str | Path = DEFAULT_PATH) -> TodoList:
    """Read the list from ``path``; a missing or unreadable file gives an empty list."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        return TodoList.from_json(text)
    except (OSError, ValueError):
        return TodoList()


def save_tasks(todo: TodoList, path: str | Path = DEFAULT_PATH) -> None:
    """Write the list to ``path`` as JSON."""
    Path(path).write_text(todo.to_json(), encoding="utf-8")


def _parse_id(text: str) -> int | None:
    text = text.strip()
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _add(todo: TodoList) -> None:
    todo.add(input("Enter task description: "))
    print("✅ Task added successfully.")


def _view(todo: TodoList) -> None:
    print(todo.render())


def _by_id(prompt: str, action: Callable[[int], object], done: str) -> None:
    task_id = _parse_id(input(prompt))
    if task_id is None:
        print("❌ Invalid ID format.")
        return
    try:
        action(task_id)
    except TaskNotFoundError as err:
        print(f"❌ {err}")
    else:
        print(done)


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the user exits; the list is saved on exit."""
    todo = load_tasks()
    actions: dict[str, Callable[[], None]] = {
        "1": lambda: _add(todo),
        "2": lambda: _view(todo),
        "3": lambda: _by_id(
            "Enter task ID to mark as complete: ",
            todo.complete,
            "✅ Task marked as complete.",
        ),
        "4": lambda: _by_id(
            "Enter task ID to delete: ", todo.delete, "✅ Task deleted successfully."
        ),
    }
    try:
        while True:
            for line in _MENU:
                print(line)
            print("Choose an option: ", end="", flush=True)
            choice = input("Enter your choice: ").strip()
            if choice == "5":
                break
            action = actions.get(choice)
            if action is None:
                print("❌ Invalid choice, please try again.")
            else:
                action()
    except EOFError:
        print()
    save_tasks(todo)
    print("✅ Task saved. Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())