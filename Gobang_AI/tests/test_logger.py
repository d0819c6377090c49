import re

from Gobang_AI.utils.logger import log_event


def test_log_event_prefixes_timestamp_and_level(capsys):
    log_event("search count: 3; cut count: 1; cache hit: 0")
    log_event("No pattern table", level="WARN")
    first, second = capsys.readouterr().out.splitlines()
    assert re.fullmatch(r"\[\d\d:\d\d:\d\d\] search count: 3; cut count: 1; cache hit: 0", first)
    assert re.fullmatch(r"\[\d\d:\d\d:\d\d\] WARN No pattern table", second)
