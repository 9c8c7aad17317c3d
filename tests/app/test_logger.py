import logging

from serper_mcp.logger import LeanLogfmt, build_logging_config, lf_encode

def make_record(msg, **extra):
    record = logging.LogRecord("serper_mcp", logging.INFO, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record

def test_lf_encode_quotes_values_with_spaces():
    assert lf_encode({"a": "plain", "b": "two words", "c": 'say "hi"'}) == 'a=plain b="two words" c="say \\"hi\\""'

def test_formatter_emits_core_fields_and_extras():
    line = LeanLogfmt().format(make_record("Searching Serper", search_type="news", num_results=5))

    assert line.startswith("ts=")
    assert line.split(" ")[0].endswith("Z")
    assert "level=info" in line
    assert "logger=serper_mcp" in line
    assert 'msg="Searching Serper"' in line
    assert "search_type=news" in line
    assert "num_results=5" in line

def test_logging_config_writes_to_stderr_at_requested_level():
    config = build_logging_config("debug")

    assert config["handlers"]["console"]["stream"] == "ext://sys.stderr"
    assert config["loggers"]["serper_mcp"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn.error"]["level"] == "DEBUG"
