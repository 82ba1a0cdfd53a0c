from benchbro import Case
from lpath import lpath

set_case = Case(
    name="set",
    case_type="cpu",
    metric_type="time",
    tags=["lpath", "set"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)


@set_case.benchmark()
def overwrite_existing_value():
    data = {"a": {"b": {"c": 1}}}

    lpath.set(data, "a.b.c", 2)


@set_case.benchmark()
def vivify_mixed_containers():
    data = {}

    lpath.set(data, "a.b[3].c.d[1][2].e", 5)


@set_case.benchmark()
def parse_heavy_arguments():
    data = {"fn": lambda *args: {}}
    path = "fn(1, 'two', [3, [4, 5]], {\"k\": [6, 7]}, true, null).result"

    lpath.set(data, path, 1)
