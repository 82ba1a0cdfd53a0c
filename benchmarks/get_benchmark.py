from benchbro import Case
from lpath import lpath

get_case = Case(
    name="get",
    case_type="cpu",
    metric_type="time",
    tags=["lpath", "get"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)


@get_case.benchmark()
def simple_path():
    data = {"a": {"b": {"c": 1}}}
    path = "a.b.c"

    lpath.get(data, path)


@get_case.benchmark()
def indexed_path_with_calls():
    data = {
        "orders": [
            {"id": i, "customer": {"name": f"customer-{i}"}} for i in range(50)
        ]
    }
    path = "orders[42].customer.name.upper().split('-')[1]"

    lpath.get(data, path)


@get_case.benchmark()
def deep_nested_path():

    data = {"a": {"b": {"c": {"d": {"e": {"f": {"g": {"h": {"i": {"j": 1}}}}}}}}}}
    path = "a.b.c.d.e.f.g.h.i.j"

    lpath.get(data, path)


@get_case.benchmark()
def missing_path_default():
    data = {"a": {"b": None}}
    path = "a.b.c.d[3].e"

    lpath.get(data, path, default=0)
