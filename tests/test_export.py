from pysbc import quick_solve
from pysbc.export import SQUAD_HEADERS, export_squad_to_csv


def test_export_squad_to_csv():
    solution = quick_solve("daily_gold")
    lines = export_squad_to_csv(solution).strip().splitlines()

    assert lines[0] == ",".join(SQUAD_HEADERS)
    assert len(lines) == 12
    assert lines[1] == "1,GK,75,Premier League,England,Manchester City,gold,960,10"
    assert lines[-1].startswith("11,RW,75,")
