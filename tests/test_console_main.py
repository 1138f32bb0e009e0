"""Tests for the console entry point."""

import logging
import sys

import console.main as console_main


def test_main_tags_logs_with_session_id(monkeypatch, temp_config_dir):
    """main() configures logging with a per-session correlation id and runs the REPL."""
    captured = {}
    started = []

    def fake_setup_logging(component_name, log_level=None, correlation_id=None, stream=None):
        captured.update(component=component_name, level=log_level, correlation_id=correlation_id)
        return logging.getLogger('filedesk-main-test')

    async def fake_repl_loop(config):
        started.append(config)

    monkeypatch.setattr(console_main, 'setup_logging', fake_setup_logging)
    monkeypatch.setattr(console_main, 'repl_loop', fake_repl_loop)
    monkeypatch.setattr(console_main, 'default_config_path', lambda: temp_config_dir / 'config.json')
    monkeypatch.setattr(console_main, 'new_session_id', lambda: 'feedbeef')
    monkeypatch.setattr(sys, 'argv', ['filedesk', '--debug'])

    console_main.main()

    assert captured == {'component': 'filedesk', 'level': 'DEBUG', 'correlation_id': 'feedbeef'}
    assert len(started) == 1
    assert sys.argv == ['filedesk']


def test_session_ids_are_short_and_distinct():
    first = console_main.new_session_id()

    assert len(first) == 8
    assert first != console_main.new_session_id()
