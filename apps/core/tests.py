from django.test import TestCase, Client

from .errors import NotFoundError, validation_errors_by_field


class HealthAPITest(TestCase):
    def setUp(self):
        self.client = Client()

    def test_ping(self):
        response = self.client.get('/api/ping')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'pong'})
        self.assertTrue(response['Content-Type'].startswith('application/json'))

    def test_sayhello(self):
        response = self.client.get('/api/sayhello')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'hello'})


class ErrorShapeTest(TestCase):
    def test_errors_grouped_by_field(self):
        errors = [
            {'loc': ('body', 'payload', 'title'), 'msg': 'Field required'},
            {'loc': ('body', 'payload', 'title'), 'msg': 'Too long'},
            {'loc': ('body', 'payload', 'completed'), 'msg': 'Input should be a valid boolean'},
        ]
        self.assertEqual(validation_errors_by_field(errors), {
            'title': ['Field required', 'Too long'],
            'completed': ['Input should be a valid boolean'],
        })

    def test_error_without_field_name(self):
        errors = [{'loc': ('body', 'payload'), 'msg': 'Invalid JSON'}]
        self.assertEqual(validation_errors_by_field(errors), {'payload': ['Invalid JSON']})

    def test_not_found_default_message(self):
        self.assertEqual(str(NotFoundError()), 'Not found')
        self.assertEqual(str(NotFoundError('Gone')), 'Gone')
