"""Tests for the bank.py entry point."""

import logging

import pytest

import bank


@pytest.fixture
def restore_loggers():
    yield
    for name in ('src', 'console'):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_main_runs_session_and_logs(monkeypatch, tmp_path, capsys, restore_loggers):
    log_file = tmp_path / 'bank.log'
    monkeypatch.setenv('BANK_LOG_FILE', str(log_file))
    monkeypatch.setenv('BANK_LOG_LEVEL', 'INFO')
    monkeypatch.setattr(bank, 'load_dotenv', lambda: None)
    lines = iter(['ACC-9', 'Alice', '100', '2', '40', '3'])
    monkeypatch.setattr('builtins.input', lambda prompt='': next(lines))

    assert bank.main() == 0

    out = capsys.readouterr().out
    assert 'Withdrawal Successful! Updated Balance: £60.00' in out
    assert 'Thank you!' in out
    log = log_file.read_text(encoding='utf-8')
    assert 'INFO:src.services.bank_service: Opened account ACC-9 for Alice' in log


def test_main_reports_bad_configuration(monkeypatch, capsys):
    monkeypatch.setenv('BANK_CURRENCY', 'XYZ')
    monkeypatch.setattr(bank, 'load_dotenv', lambda: None)

    assert bank.main() == 1
    assert 'Configuration error: BANK_CURRENCY' in capsys.readouterr().err
