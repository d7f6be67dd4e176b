import asyncio

from unittest import mock

import httpx
import pytest

from taskapi.client import TaskClient
from taskapi.server import TaskServer
from taskapi.utils.telemetry import SpanKind, trace_class, trace_function


@pytest.fixture
def mock_span():
    return mock.MagicMock()


@pytest.fixture
def mock_tracer(mock_span):
    tracer = mock.MagicMock()
    tracer.start_as_current_span.return_value.__enter__.return_value = mock_span
    tracer.start_as_current_span.return_value.__exit__.return_value = False
    return tracer


@pytest.fixture(autouse=True)
def patch_trace_get_tracer(mock_tracer):
    with mock.patch('opentelemetry.trace.get_tracer', return_value=mock_tracer):
        yield


def test_trace_function_sync_success(mock_span, mock_tracer):
    @trace_function
    def add(x, y):
        return x + y

    assert add(2, 3) == 5
    mock_tracer.start_as_current_span.assert_called_once_with(
        f'{__name__}.test_trace_function_sync_success.<locals>.add',
        kind=SpanKind.INTERNAL,
    )
    mock_span.set_status.assert_called()
    mock_span.record_exception.assert_not_called()


def test_trace_function_sync_exception(mock_span):
    @trace_function
    def fail():
        raise ValueError('fail')

    with pytest.raises(ValueError):
        fail()
    mock_span.record_exception.assert_called()
    mock_span.set_status.assert_any_call(mock.ANY, description='fail')


def test_trace_function_static_attributes(mock_span):
    @trace_function(span_name='store.op', attributes={'store': 'memory'})
    def op():
        return None

    op()
    mock_span.set_attribute.assert_called_once_with('store', 'memory')


def test_attribute_extractor_receives_result(mock_span):
    seen = {}

    def extractor(span, args, kwargs, result, exception):
        seen['span'] = span
        seen['result'] = result
        seen['exception'] = exception

    @trace_function(attribute_extractor=extractor)
    def answer():
        return 42

    answer()
    assert seen == {'span': mock_span, 'result': 42, 'exception': None}


def test_attribute_extractor_error_logged():
    with mock.patch('taskapi.utils.telemetry.logger') as logger:

        def extractor(span, args, kwargs, result, exception):
            raise RuntimeError('attr fail')

        @trace_function(attribute_extractor=extractor)
        def one():
            return 1

        assert one() == 1
        logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_trace_function_async_success(mock_span):
    @trace_function
    async def double(x):
        await asyncio.sleep(0)
        return x * 2

    assert await double(4) == 8
    mock_span.set_status.assert_called()


@pytest.mark.asyncio
async def test_trace_function_async_exception(mock_span):
    @trace_function
    async def fail():
        await asyncio.sleep(0)
        raise RuntimeError('async fail')

    with pytest.raises(RuntimeError):
        await fail()
    mock_span.record_exception.assert_called()


def test_trace_class_include_and_exclude(mock_tracer):
    @trace_class(exclude_list=['skipped'])
    class Service:
        def traced(self):
            return 'traced'

        def skipped(self):
            return 'skipped'

    service = Service()
    assert service.traced() == 'traced'
    assert service.skipped() == 'skipped'
    assert mock_tracer.start_as_current_span.call_count == 1
    span_name = mock_tracer.start_as_current_span.call_args.args[0]
    assert span_name.endswith('Service.traced')


def test_trace_class_include_list(mock_tracer):
    @trace_class(include_list=['only'], kind=SpanKind.SERVER)
    class Service:
        def only(self):
            return 1

        def other(self):
            return 2

    Service().only()
    Service().other()
    mock_tracer.start_as_current_span.assert_called_once_with(
        mock.ANY, kind=SpanKind.SERVER
    )


def test_trace_class_skips_private_helpers(mock_tracer):
    @trace_class()
    class Service:
        def public(self):
            return self._helper()

        def _helper(self):
            return 'done'

    assert Service().public() == 'done'
    mock_tracer.start_as_current_span.assert_called_once()
    span_name = mock_tracer.start_as_current_span.call_args.args[0]
    assert span_name.endswith('Service.public')


def test_trace_class_private_helper_in_include_list(mock_tracer):
    @trace_class(include_list=['_helper'])
    class Service:
        def _helper(self):
            return 'done'

    Service()._helper()
    mock_tracer.start_as_current_span.assert_called_once()


@pytest.mark.asyncio
async def test_task_client_call_creates_single_span(mock_tracer):
    client = TaskClient(
        httpx_client=httpx.AsyncClient(
            transport=httpx.ASGITransport(app=TaskServer().app()),
            base_url='http://testserver',
        ),
        base_url='http://testserver',
    )
    await client.get_task(1)
    span_names = [
        call.args[0]
        for call in mock_tracer.start_as_current_span.call_args_list
    ]
    assert [name for name in span_names if '.TaskClient.' in name] == [
        'taskapi.client.client.TaskClient.get_task'
    ]
