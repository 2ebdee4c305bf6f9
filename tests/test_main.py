"""Tests for the server entry point (main.py)."""

from unittest.mock import MagicMock, patch

import pytest

from typed_access import main as entry
from typed_access.core.config import Config


def test_logging_is_configured_before_the_app_is_built(config: Config) -> None:
    calls = MagicMock()
    calls.create_app.side_effect = lambda cfg: MagicMock(state=MagicMock(config=cfg.accessor()))

    with patch.object(entry.Config, "from_env", return_value=config), \
            patch.object(entry.logging, "basicConfig", calls.basicConfig), \
            patch.object(entry, "create_app", calls.create_app), \
            patch.object(entry.uvicorn, "run", calls.run):
        entry.main()

    names = [name for name, _, _ in calls.mock_calls]
    assert names == ["basicConfig", "create_app", "run"]
    assert calls.basicConfig.call_args.kwargs["level"] == "WARNING"
    assert calls.run.call_args.kwargs == {"host": "0.0.0.0", "port": 8080}


def test_invalid_log_level_stops_before_logging_setup() -> None:
    with patch.object(entry.Config, "from_env", return_value=Config(LOG_LEVEL="VERBOSE")), \
            patch.object(entry.logging, "basicConfig") as basic_config, \
            patch.object(entry.uvicorn, "run") as run:
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            entry.main()

    basic_config.assert_not_called()
    run.assert_not_called()
