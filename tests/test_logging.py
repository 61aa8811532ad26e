import logging

from loguru import logger

from league_standings.logging.setup import setup_logging


def test_stdlib_records_reach_loguru_with_source():
    setup_logging("DEBUG")
    captured = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    try:
        logging.getLogger("league.feed").warning("feed is stale")
    finally:
        logger.remove(sink_id)

    record = captured[-1]
    assert record["message"] == "feed is stale"
    assert record["level"].name == "WARNING"
    assert record["extra"]["source"] == "league.feed"


def test_loguru_records_tagged_with_module_name():
    setup_logging("INFO")
    captured = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="INFO")
    try:
        logger.info("week built")
    finally:
        logger.remove(sink_id)

    assert captured[-1]["extra"]["source"] == __name__
