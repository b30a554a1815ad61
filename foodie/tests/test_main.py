import sys
from unittest.mock import patch

from foodie.__main__ import main


@patch("foodie.__main__.uvicorn.run")
@patch("foodie.__main__.configure_logging")
def test_server_entry_point_configures_logging(mock_logging, mock_run):
    with patch.object(sys, "argv", ["foodie", "--port", "8080"]):
        main()

    mock_logging.assert_called_once_with()
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("foodie.app:app",)
    assert kwargs["port"] == 8080
    assert kwargs["reload"] is False

