"""
Integration tests for tasks API endpoints.
Tests status codes, response envelopes, and the end-to-end CRUD flow.
"""
from unittest.mock import MagicMock

from bson import ObjectId
from django.test import SimpleTestCase
from ninja.testing import TestClient

from apps.core.backends.memory_backend import InMemoryTaskStore
from apps.core.store import StoreFailure, TaskStoreInterface
from apps.tasks.api import build_router


TASK_PAYLOAD = {
    'description': 'write report',
    'startDate': '2024-01-01T00:00:00Z',
    'endDate': '2024-01-02T00:00:00Z',
    'status': 'Pending',
}


class TaskAPITest(SimpleTestCase):
    """Test task endpoints against an in-memory store."""

    def setUp(self):
        self.store = InMemoryTaskStore()
        self.client = TestClient(build_router(self.store))

    def create(self, **overrides):
        response = self.client.post('/', json={**TASK_PAYLOAD, **overrides})
        self.assertEqual(response.status_code, 201)
        return response.json()['data']

    def test_list_empty(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True, 'data': [], 'total': 0})

    def test_list_returns_tasks_in_insertion_order(self):
        first = self.create(description='first')
        second = self.create(description='second')

        data = self.client.get('/').json()
        self.assertEqual(data['total'], 2)
        self.assertEqual([t['id'] for t in data['data']], [first['id'], second['id']])

    def test_create_task(self):
        """Created task echoes the submitted fields plus an assigned id."""
        response = self.client.post('/', json=TASK_PAYLOAD)
        self.assertEqual(response.status_code, 201)

        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['message'], 'Task created successfully')
        task = body['data']
        for field, value in TASK_PAYLOAD.items():
            self.assertEqual(task[field], value)
        self.assertTrue(ObjectId.is_valid(task['id']))
        self.assertIn('createdAt', task)
        self.assertNotIn('updatedAt', task)

    def test_create_missing_field(self):
        payload = dict(TASK_PAYLOAD)
        del payload['status']
        response = self.client.post('/', json=payload)

        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertFalse(body['success'])
        self.assertIn('status', body['message'])
        self.assertEqual(self.store.find_all(), [])

    def test_create_empty_field(self):
        response = self.client.post('/', json={**TASK_PAYLOAD, 'description': ''})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.store.find_all(), [])

    def test_get_task(self):
        created = self.create()
        response = self.client.get(f"/{created['id']}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True, 'data': created})

    def test_get_invalid_id(self):
        response = self.client.get('/not-an-id')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'success': False, 'message': 'Invalid task ID'})

    def test_get_unknown_id(self):
        response = self.client.get(f'/{ObjectId()}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'success': False, 'message': 'Task not found'})

    def test_partial_update(self):
        """Only submitted fields change; the rest keep their values."""
        created = self.create()
        response = self.client.put(f"/{created['id']}", json={'status': 'Done'})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['message'], 'Task updated successfully')
        task = body['data']
        self.assertEqual(task['status'], 'Done')
        self.assertEqual(task['description'], created['description'])
        self.assertEqual(task['startDate'], created['startDate'])
        self.assertEqual(task['endDate'], created['endDate'])
        self.assertEqual(task['createdAt'], created['createdAt'])
        self.assertIn('updatedAt', task)

    def test_update_with_empty_body_only_touches_timestamp(self):
        created = self.create()
        response = self.client.put(f"/{created['id']}", json={})

        self.assertEqual(response.status_code, 200)
        task = response.json()['data']
        for field in TASK_PAYLOAD:
            self.assertEqual(task[field], created[field])
        self.assertIn('updatedAt', task)

    def test_update_rejects_null_field(self):
        created = self.create()
        response = self.client.put(f"/{created['id']}", json={'description': None})

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()['success'])
        self.assertEqual(self.store.find_by_id(created['id']), created)

    def test_update_invalid_id(self):
        response = self.client.put('/123', json={'status': 'Done'})
        self.assertEqual(response.status_code, 400)

    def test_update_unknown_id(self):
        response = self.client.put(f'/{ObjectId()}', json={'status': 'Done'})
        self.assertEqual(response.status_code, 404)

    def test_delete_task(self):
        created = self.create()
        response = self.client.delete(f"/{created['id']}")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['message'], 'Task deleted successfully')
        self.assertEqual(body['data'], created)

        # Gone afterwards, and deleting again is a 404
        self.assertEqual(self.client.get(f"/{created['id']}").status_code, 404)
        self.assertEqual(self.client.delete(f"/{created['id']}").status_code, 404)

    def test_delete_invalid_id(self):
        response = self.client.delete('/xyz')
        self.assertEqual(response.status_code, 400)

    def test_full_lifecycle(self):
        """POST -> GET -> PUT -> DELETE -> GET"""
        response = self.client.post('/', json=TASK_PAYLOAD)
        self.assertEqual(response.status_code, 201)
        task_id = response.json()['data']['id']

        response = self.client.get(f'/{task_id}')
        self.assertEqual(response.status_code, 200)
        fetched = response.json()['data']
        for field, value in TASK_PAYLOAD.items():
            self.assertEqual(fetched[field], value)

        response = self.client.put(f'/{task_id}', json={'status': 'Done'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['status'], 'Done')
        self.assertEqual(response.json()['data']['description'], 'write report')

        response = self.client.delete(f'/{task_id}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['id'], task_id)

        response = self.client.get(f'/{task_id}')
        self.assertEqual(response.status_code, 404)


class TaskAPIStoreFailureTest(SimpleTestCase):
    """Store errors surface as 500 with the driver message echoed back."""

    def setUp(self):
        self.store = MagicMock(spec=TaskStoreInterface)
        self.client = TestClient(build_router(self.store))

    def test_list_store_failure(self):
        self.store.find_all.side_effect = StoreFailure('connection refused')
        response = self.client.get('/')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {
            'success': False,
            'message': 'Failed to fetch tasks',
            'error': 'connection refused',
        })

    def test_create_store_failure(self):
        self.store.create.side_effect = StoreFailure('not authorized')
        response = self.client.post('/', json=TASK_PAYLOAD)

        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertEqual(body['message'], 'Failed to create task')
        self.assertEqual(body['error'], 'not authorized')

    def test_update_store_failure(self):
        self.store.update_by_id.side_effect = StoreFailure('timed out')
        response = self.client.put(f'/{ObjectId()}', json={'status': 'Done'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['message'], 'Failed to update task')

    def test_validation_never_reaches_store(self):
        self.assertEqual(self.client.get('/bad').status_code, 400)
        self.assertEqual(self.client.put('/bad', json={}).status_code, 400)
        self.assertEqual(self.client.delete('/bad').status_code, 400)
        self.assertEqual(self.client.post('/', json={}).status_code, 400)

        self.store.find_by_id.assert_not_called()
        self.store.update_by_id.assert_not_called()
        self.store.delete_by_id.assert_not_called()
        self.store.create.assert_not_called()
