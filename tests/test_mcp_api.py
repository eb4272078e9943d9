import unittest
from unittest.mock import patch
from mcp_server import API_URL, list_tasks, add_task, toggle_task, delete_task


class TestMcpTools(unittest.TestCase):

    @patch("mcp_server.requests.get")
    def test_list_tasks(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = [{"id": 1, "text": "Mock Task", "completed": False}]

        tasks = list_tasks()
        self.assertIsInstance(tasks, list)
        self.assertEqual(tasks[0]["text"], "Mock Task")
        self.assertEqual(mock_get.call_args[0][0], f"{API_URL}/tasks")

    @patch("mcp_server.requests.post")
    def test_add_task(self, mock_post):
        mock_post.return_value.status_code = 201
        mock_post.return_value.json.return_value = {"id": 4, "text": "New Task", "completed": False}

        task = add_task("New Task")
        self.assertEqual(task["text"], "New Task")
        self.assertEqual(mock_post.call_args[1]["json"], {"text": "New Task"})

    @patch("mcp_server.requests.put")
    def test_toggle_task(self, mock_put):
        mock_put.return_value.status_code = 200
        mock_put.return_value.json.return_value = {"id": 2, "text": "Learn Node.js", "completed": True}

        task = toggle_task(2)
        self.assertTrue(task["completed"])
        self.assertEqual(mock_put.call_args[0][0], f"{API_URL}/tasks/2")

    @patch("mcp_server.requests.put")
    def test_toggle_missing_task(self, mock_put):
        mock_put.return_value.status_code = 404
        mock_put.return_value.json.return_value = {"message": "Task not found"}

        result = toggle_task(999)
        self.assertEqual(result, {"message": "Task not found"})
        mock_put.return_value.raise_for_status.assert_not_called()

    @patch("mcp_server.requests.delete")
    def test_delete_task(self, mock_delete):
        mock_delete.return_value.status_code = 200
        mock_delete.return_value.json.return_value = {"message": "Task deleted"}

        result = delete_task(1)
        self.assertEqual(result["message"], "Task deleted")
        mock_delete.return_value.raise_for_status.assert_called_once()


if __name__ == "__main__":
    unittest.main()
