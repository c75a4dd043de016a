"""Tests for the serverless entry module."""

import importlib
import logging
import sys

from fastapi import FastAPI


def test_serverless_entry_configures_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delitem(sys.modules, "api.index", raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        root.setLevel(logging.WARNING)
        module = importlib.import_module("api.index")
        assert isinstance(module.app, FastAPI)
        assert root.level == logging.INFO
        assert logging.getLogger("tiktok_relay.api.endpoints").isEnabledFor(logging.INFO)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
