import pytest
from unittest.mock import MagicMock
from cmdhistory.core.events import Signal, ObserverEvent

def test_signal_subscribe_emit():
    event = Signal("test_evt")
    results = []
    
    def callback(payload):
        results.append(payload)
        
    event.connect(callback)
    event.emit("hello")
    
    assert len(results) == 1
    assert results[0] == "hello"

def test_signal_disconnect():
    event = Signal("test_evt")
    callback = MagicMock()
        
    event.connect(callback)
    event.disconnect(callback)
    event.emit()
    
    callback.assert_not_called()
    assert event.subscriber_count == 0

def test_signal_connect_is_idempotent():
    event = Signal("test_evt")
    callback = MagicMock()

    event.connect(callback)
    event.connect(callback)
    event.emit(1)

    callback.assert_called_once_with(1)

def test_disconnect_unknown_callback_is_noop():
    event = Signal("test_evt")
    event.disconnect(MagicMock())
    assert event.subscriber_count == 0

def test_subscriber_may_disconnect_itself():
    event = Signal("test_evt")
    other = MagicMock()

    def once():
        event.disconnect(once)

    event.connect(once)
    event.connect(other)
    event.emit()
    event.emit()

    assert other.call_count == 2
    assert event.subscriber_count == 1

def test_signal_error_safety(caplog):
    """Ensure error in one subscriber doesnt block others"""
    event = Signal("err_evt")
    results = []
    
    def buggy_callback():
        raise ValueError("Bug")
        
    def worker_callback():
        results.append("ok")
        
    event.connect(buggy_callback)
    event.connect(worker_callback)
    
    event.emit()
    
    assert results == ["ok"]
    assert "Bug" in caplog.text

def test_observer_event_alias():
    assert ObserverEvent is Signal
