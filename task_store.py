"""
In-memory task store backing the task list API.
"""

import logging
import threading
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Task:
    """Task record"""
    id: int
    text: Any
    completed: bool = False


DEFAULT_TASKS = [
    {"id": 1, "text": "Learn React", "completed": False},
    {"id": 2, "text": "Learn Node.js", "completed": False},
    {"id": 3, "text": "Build a project", "completed": False},
]


class TaskStore:
    """Holds the task collection and the operations on it.

    Every method takes the store lock, so a threaded server never sees a
    half-applied mutation. Callers get plain dicts back, never the records.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._seed = DEFAULT_TASKS if seed is None else seed
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self._next_id = 1
        self.reset()

    def reset(self):
        """Restore the seed tasks and the id counter."""
        with self._lock:
            self._tasks = [Task(**task) for task in self._seed]
            # ids are never reused, even after the highest one is deleted
            self._next_id = max((task.id for task in self._tasks), default=0) + 1

    def list_tasks(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [asdict(task) for task in self._tasks]

    def create_task(self, text: Any) -> Dict[str, Any]:
        with self._lock:
            task = Task(id=self._next_id, text=text)
            self._next_id += 1
            self._tasks.append(task)
        logger.info(f"Created task {task.id}")
        return asdict(task)

    def toggle_task(self, task_id: Optional[int]) -> Optional[Dict[str, Any]]:
        """Flip the completed flag of a task. Returns None if no task matches."""
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    task.completed = not task.completed
                    result = asdict(task)
                    break
            else:
                result = None

        if result is None:
            logger.info(f"Toggle requested for unknown task {task_id}")
        else:
            logger.info(f"Toggled task {task_id} to completed={result['completed']}")
        return result

    def delete_task(self, task_id: Optional[int]) -> int:
        """Remove every task with the given id and return how many went."""
        with self._lock:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id != task_id]
            removed = before - len(self._tasks)
        logger.info(f"Deleted {removed} task(s) with id {task_id}")
        return removed

    def __len__(self):
        with self._lock:
            return len(self._tasks)
