"""
Integration tests for task API endpoints.
Tests status codes, body shapes, auth gating and end-to-end flows.
"""
import json
from unittest import mock
from django.test import TestCase, Client, override_settings
from django.contrib.auth import get_user_model

from apps.identity.jwt_auth import create_access_token
from apps.identity.models import UserRole
from apps.tasks.models import Task


User = get_user_model()


def make_user(username, role=UserRole.MEMBER):
    return User.objects.create_user(
        username=username,
        email=f'{username}@test.com',
        password='testpass123',
        role=role,
    )


def bearer(user):
    return {'HTTP_AUTHORIZATION': f'Bearer {create_access_token(user.id, user.role)}'}


class TaskAPITestCase(TestCase):

    def setUp(self):
        self.client = Client()
        self.user = make_user('alice')
        self.other_user = make_user('bob')

    def post_json(self, url, payload, **extra):
        return self.client.post(url, data=json.dumps(payload), content_type='application/json', **extra)

    def put_json(self, url, payload, **extra):
        return self.client.put(url, data=json.dumps(payload), content_type='application/json', **extra)


class CreateTaskAPITest(TaskAPITestCase):

    def test_create_task(self):
        """Creating a task returns 201 and the stored row owned by the caller."""
        response = self.post_json(
            '/api/addtask',
            {'title': 'Buy milk', 'description': '2%'},
            **bearer(self.user),
        )
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data['title'], 'Buy milk')
        self.assertEqual(data['description'], '2%')
        self.assertFalse(data['completed'])
        self.assertEqual(data['owner_id'], self.user.id)
        for key in ('id', 'created_at', 'updated_at'):
            self.assertIn(key, data)
        self.assertTrue(Task.objects.filter(id=data['id'], owner=self.user).exists())

    def test_create_task_without_description_defaults_to_empty(self):
        response = self.post_json('/api/addtask', {'title': 'No details'}, **bearer(self.user))
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['description'], '')

    def test_create_task_without_title_is_rejected(self):
        """Missing title is a validation failure, never a 201."""
        response = self.post_json('/api/addtask', {'description': 'orphan'}, **bearer(self.user))
        self.assertEqual(response.status_code, 422)

        data = response.json()
        self.assertIn('message', data)
        self.assertIn('title', data['errors'])
        self.assertEqual(Task.objects.count(), 0)

    def test_create_task_with_blank_title_is_rejected(self):
        response = self.post_json('/api/addtask', {'title': '   '}, **bearer(self.user))
        self.assertEqual(response.status_code, 422)
        self.assertIn('title', response.json()['errors'])

    def test_create_task_with_overlong_title_is_rejected(self):
        response = self.post_json('/api/addtask', {'title': 'x' * 256}, **bearer(self.user))
        self.assertEqual(response.status_code, 422)
        self.assertIn('title', response.json()['errors'])

    def test_create_task_title_at_max_length(self):
        response = self.post_json('/api/addtask', {'title': 'x' * 255}, **bearer(self.user))
        self.assertEqual(response.status_code, 201)

    def test_create_task_with_non_string_description_is_rejected(self):
        response = self.post_json('/api/addtask', {'title': 'ok', 'description': 42}, **bearer(self.user))
        self.assertEqual(response.status_code, 422)
        self.assertIn('description', response.json()['errors'])

    def test_create_task_requires_auth(self):
        """Create needs a caller to own the task."""
        response = self.post_json('/api/addtask', {'title': 'Anonymous'})
        self.assertEqual(response.status_code, 401)
        self.assertIn('error', response.json())
        self.assertEqual(Task.objects.count(), 0)

    def test_create_task_ignores_owner_in_body(self):
        response = self.post_json(
            '/api/addtask',
            {'title': 'Mine', 'owner_id': self.other_user.id},
            **bearer(self.user),
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['owner_id'], self.user.id)

    def test_create_task_store_failure_returns_500(self):
        with mock.patch('apps.tasks.services.create_task', side_effect=RuntimeError('db down')):
            response = self.post_json('/api/addtask', {'title': 'Boom'}, **bearer(self.user))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'error': 'Failed to create task'})


class ListTasksAPITest(TaskAPITestCase):

    def test_list_tasks_requires_auth(self):
        response = self.client.get('/api/tasks')
        self.assertEqual(response.status_code, 401)
        self.assertIn('error', response.json())

    def test_list_tasks_rejects_invalid_token(self):
        response = self.client.get('/api/tasks', HTTP_AUTHORIZATION='Bearer not-a-token')
        self.assertEqual(response.status_code, 401)

    def test_list_tasks_rejects_inactive_user(self):
        headers = bearer(self.user)
        self.user.is_active = False
        self.user.save()
        response = self.client.get('/api/tasks', **headers)
        self.assertEqual(response.status_code, 401)

    def test_list_tasks_forbidden_without_permission(self):
        """Guests pass authentication but fail the listing policy."""
        guest = make_user('guest', role=UserRole.GUEST)
        response = self.client.get('/api/tasks', **bearer(guest))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {'error': 'Permission denied'})

    def test_list_tasks_is_not_scoped_to_caller(self):
        """
        Tasks from every owner are returned.

        Likely an authorization defect: the route is authenticated but the
        result is not filtered by owner. Kept as-is for client compatibility.
        """
        Task.objects.create(title='Alice task', owner=self.user)
        Task.objects.create(title='Bob task', owner=self.other_user)

        response = self.client.get('/api/tasks', **bearer(self.user))
        self.assertEqual(response.status_code, 200)

        titles = [t['title'] for t in response.json()]
        self.assertEqual(titles, ['Alice task', 'Bob task'])

    def test_list_tasks_empty(self):
        response = self.client.get('/api/tasks', **bearer(self.user))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_list_tasks_accepts_cookie_token(self):
        self.client.cookies['access_token'] = create_access_token(self.user.id, self.user.role)
        response = self.client.get('/api/tasks')
        self.assertEqual(response.status_code, 200)

    def test_list_tasks_store_failure_returns_500(self):
        with mock.patch('apps.tasks.services.list_tasks', side_effect=RuntimeError('db down')):
            response = self.client.get('/api/tasks', **bearer(self.user))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'error': 'Failed to retrieve tasks'})

    @override_settings(DEBUG=True)
    def test_list_tasks_store_failure_includes_detail_in_debug(self):
        with mock.patch('apps.tasks.services.list_tasks', side_effect=RuntimeError('db down')):
            response = self.client.get('/api/tasks', **bearer(self.user))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'error': 'Failed to retrieve tasks: db down'})


class ShowTaskAPITest(TaskAPITestCase):

    def setUp(self):
        super().setUp()
        self.task = Task.objects.create(title='Read book', description='Chapter 3', owner=self.user)

    def test_show_task(self):
        response = self.client.get(f'/api/task/{self.task.id}')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['id'], self.task.id)
        self.assertEqual(data['title'], 'Read book')
        self.assertEqual(data['description'], 'Chapter 3')
        self.assertFalse(data['completed'])
        self.assertEqual(data['owner_id'], self.user.id)

    def test_show_missing_task(self):
        response = self.client.get(f'/api/task/{self.task.id + 1000}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Task not found'})

    def test_show_non_numeric_id_is_not_found(self):
        response = self.client.get('/api/task/abc')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Task not found'})


class UpdateTaskAPITest(TaskAPITestCase):

    def setUp(self):
        super().setUp()
        self.task = Task.objects.create(title='Write report', description='Q3 numbers', owner=self.user)

    def test_update_completed_only(self):
        """Only supplied fields change."""
        response = self.put_json(f'/api/updatetask/{self.task.id}', {'completed': True})
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertTrue(data['completed'])
        self.assertEqual(data['title'], 'Write report')
        self.assertEqual(data['description'], 'Q3 numbers')

        self.task.refresh_from_db()
        self.assertTrue(self.task.completed)
        self.assertEqual(self.task.title, 'Write report')

    def test_update_all_fields(self):
        response = self.put_json(
            f'/api/updatetask/{self.task.id}',
            {'title': 'Write summary', 'description': 'Q4', 'completed': True},
        )
        self.assertEqual(response.status_code, 201)

        self.task.refresh_from_db()
        self.assertEqual(self.task.title, 'Write summary')
        self.assertEqual(self.task.description, 'Q4')
        self.assertTrue(self.task.completed)

    def test_update_keeps_owner(self):
        response = self.put_json(
            f'/api/updatetask/{self.task.id}',
            {'title': 'Renamed', 'owner_id': self.other_user.id},
        )
        self.assertEqual(response.status_code, 201)
        self.task.refresh_from_db()
        self.assertEqual(self.task.owner_id, self.user.id)

    def test_update_null_field_is_ignored(self):
        response = self.put_json(f'/api/updatetask/{self.task.id}', {'title': None})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['title'], 'Write report')

    def test_update_with_invalid_completed_is_rejected(self):
        response = self.put_json(f'/api/updatetask/{self.task.id}', {'completed': 'maybe'})
        self.assertEqual(response.status_code, 422)
        self.assertIn('completed', response.json()['errors'])

    def test_update_with_overlong_title_is_rejected(self):
        response = self.put_json(f'/api/updatetask/{self.task.id}', {'title': 'x' * 256})
        self.assertEqual(response.status_code, 422)
        self.task.refresh_from_db()
        self.assertEqual(self.task.title, 'Write report')

    def test_update_missing_task(self):
        response = self.put_json(f'/api/updatetask/{self.task.id + 1000}', {'completed': True})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Task not found'})


class DestroyTaskAPITest(TaskAPITestCase):

    def setUp(self):
        super().setUp()
        self.task = Task.objects.create(title='Old task', owner=self.user)

    def test_destroy_task(self):
        response = self.client.delete(f'/api/task/{self.task.id}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'Task deleted successfully'})
        self.assertFalse(Task.objects.filter(id=self.task.id).exists())

    def test_destroy_then_show_is_not_found(self):
        self.client.delete(f'/api/task/{self.task.id}')
        response = self.client.get(f'/api/task/{self.task.id}')
        self.assertEqual(response.status_code, 404)

    def test_destroy_missing_task(self):
        response = self.client.delete(f'/api/task/{self.task.id + 1000}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Task not found'})

    def test_destroy_twice(self):
        self.assertEqual(self.client.delete(f'/api/task/{self.task.id}').status_code, 200)
        self.assertEqual(self.client.delete(f'/api/task/{self.task.id}').status_code, 404)


class TaskLifecycleAPITest(TaskAPITestCase):

    def test_create_show_delete_flow(self):
        """POST -> GET -> DELETE -> GET as one authenticated user."""
        created = self.post_json(
            '/api/addtask',
            {'title': 'Buy milk', 'description': '2%'},
            **bearer(self.user),
        )
        self.assertEqual(created.status_code, 201)
        body = created.json()
        self.assertEqual(body['title'], 'Buy milk')
        self.assertFalse(body['completed'])
        self.assertEqual(body['owner_id'], self.user.id)

        shown = self.client.get(f"/api/task/{body['id']}")
        self.assertEqual(shown.status_code, 200)
        self.assertEqual(shown.json(), body)

        deleted = self.client.delete(f"/api/task/{body['id']}")
        self.assertEqual(deleted.status_code, 200)

        gone = self.client.get(f"/api/task/{body['id']}")
        self.assertEqual(gone.status_code, 404)
