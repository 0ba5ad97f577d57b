import logging

import numpy as np

from planar_kernel import LineString, MultiPoint
from planar_kernel.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_safe_repr_summarizes_geometries():
    line = LineString(((0, 0), (3, 4)))
    assert _safe_repr(line) == f'LineString(positions=2, envelope={line.envelope()})'
    assert _safe_repr(MultiPoint()).startswith('MultiPoint(positions=0')


def test_safe_repr_summarizes_large_arrays():
    rendered = _safe_repr(np.arange(20, dtype=float))
    assert 'shape=(20,)' in rendered
    assert 'min=0' in rendered
    assert 'max=19' in rendered


def test_safe_repr_truncates_sequences():
    assert _safe_repr(list(range(10))) == '[0, 1, 2, 3, 4, ...]'


def test_debug_log_call_records_entry_and_exit(caplog):
    logger = logging.getLogger('planar_kernel.tests.debug')

    @debug_log_call(logger)
    def add(a, b=1):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(2, b=3) == 5

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith('Entering') and 'args=[2]' in m and 'kwargs={b=3}' in m for m in messages)
    assert any(m.startswith('Exiting') and m.endswith('-> 5') for m in messages)


def test_debug_log_call_is_idempotent():
    logger = logging.getLogger('planar_kernel.tests.debug')

    def noop():
        return None

    wrapped = debug_log_call(logger)(noop)
    assert debug_log_call(logger)(wrapped) is wrapped


def test_apply_debug_logging_wraps_only_public_local_functions():
    def public():
        return 1

    def _private():
        return 2

    public.__module__ = 'fake_module'
    _private.__module__ = 'fake_module'
    namespace = {'__name__': 'fake_module', 'public': public, '_private': _private, 'imported': len}
    apply_debug_logging(namespace)

    assert getattr(namespace['public'], '_debug_logging_wrapped', False)
    assert namespace['_private'] is _private
    assert namespace['imported'] is len
    assert namespace['public']() == 1
