"""
Unit tests for structured event logging.
"""

import json

from shopping_cart.services import logging as cart_logging
from shopping_cart.services.logging import log_event, set_log_level


def _events(capsys):
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_event_is_one_json_line(capsys):
    log_event('info', 'cart.test', product_id=42)
    events = _events(capsys)
    assert len(events) == 1
    assert events[0]['level'] == 'info'
    assert events[0]['event'] == 'cart.test'
    assert events[0]['product_id'] == 42
    assert events[0]['ts'].endswith('Z')


def test_below_threshold_dropped(capsys):
    set_log_level('WARNING')
    log_event('info', 'cart.quiet')
    log_event('error', 'cart.loud')
    assert [e['event'] for e in _events(capsys)] == ['cart.loud']


def test_debug_enabled(capsys):
    set_log_level('DEBUG')
    log_event('debug', 'cart.trace')
    assert [e['event'] for e in _events(capsys)] == ['cart.trace']


def test_threshold_read_from_environment(capsys, monkeypatch):
    """Without set_log_level, CART_LOG_LEVEL applies on the first event."""
    monkeypatch.setattr(cart_logging, '_threshold', None)
    monkeypatch.setenv('CART_LOG_LEVEL', 'ERROR')
    log_event('info', 'cart.quiet')
    log_event('error', 'cart.loud')
    assert [e['event'] for e in _events(capsys)] == ['cart.loud']


def test_unknown_environment_level_falls_back_to_info(capsys, monkeypatch):
    monkeypatch.setattr(cart_logging, '_threshold', None)
    monkeypatch.setenv('CART_LOG_LEVEL', 'verbose')
    log_event('debug', 'cart.trace')
    log_event('info', 'cart.note')
    assert [e['event'] for e in _events(capsys)] == ['cart.note']
