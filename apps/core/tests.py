from django.db import IntegrityError, InterfaceError, OperationalError, ProgrammingError
from django.test import RequestFactory, SimpleTestCase
from ninja.errors import HttpError

from .db import store_errors
from .exceptions import InvalidId, NotFound, QueryFailed, StoreUnavailable
from .handlers import format_validation_errors, plain_text_error
from .parser import JSONObjectParser


class StoreErrorsTest(SimpleTestCase):

    def test_connection_failures_become_store_unavailable(self):
        for exc in (OperationalError('could not connect to server'), InterfaceError('connection already closed')):
            with self.assertRaises(StoreUnavailable) as ctx:
                with store_errors():
                    raise exc
            self.assertEqual(str(ctx.exception), str(exc))

    def test_statement_failures_become_query_failed(self):
        for exc in (IntegrityError('violates foreign key constraint'), ProgrammingError('syntax error')):
            with self.assertRaises(QueryFailed):
                with store_errors():
                    raise exc

    def test_domain_errors_pass_through(self):
        with self.assertRaises(NotFound):
            with store_errors():
                raise NotFound('task 7 not found')

    def test_no_error(self):
        with store_errors():
            value = 1
        self.assertEqual(value, 1)


class ErrorStatusTest(SimpleTestCase):

    def test_status_codes(self):
        self.assertEqual(InvalidId('x').status_code, 400)
        self.assertEqual(QueryFailed('x').status_code, 400)
        self.assertEqual(NotFound('x').status_code, 400)
        self.assertEqual(StoreUnavailable('x').status_code, 503)

    def test_not_found_is_a_query_failure(self):
        self.assertTrue(issubclass(NotFound, QueryFailed))


class PlainTextErrorTest(SimpleTestCase):

    def test_body_is_raw_message(self):
        response = plain_text_error('task 3 not found', 404)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b'task 3 not found')
        self.assertEqual(response['Content-Type'], 'text/plain; charset=utf-8')
        self.assertEqual(response['X-Content-Type-Options'], 'nosniff')

    def test_http_error_message(self):
        self.assertEqual(str(HttpError(400, 'Cannot parse request body')), 'Cannot parse request body')

    def test_validation_errors_flattened(self):
        errors = [
            {'loc': ('body', 'payload', 'status'), 'msg': 'Input should be a valid boolean'},
            {'loc': ('body',), 'msg': 'Field required'},
        ]
        self.assertEqual(
            format_validation_errors(errors),
            'payload.status: Input should be a valid boolean; request: Field required',
        )


class JSONObjectParserTest(SimpleTestCase):

    def parse(self, body: bytes):
        request = RequestFactory().post('/list/add', data=body, content_type='application/json')
        return JSONObjectParser().parse_body(request)

    def test_object_passes_through(self):
        self.assertEqual(self.parse(b'{"task": "x"}'), {'task': 'x'})

    def test_null_becomes_empty_object(self):
        self.assertEqual(self.parse(b'null'), {})

    def test_arrays_and_scalars_rejected(self):
        for body in (b'[1, 2]', b'[]', b'"buy milk"', b'42', b'true'):
            with self.assertRaises(HttpError) as ctx:
                self.parse(body)
            self.assertEqual(ctx.exception.status_code, 400)
