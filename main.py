# main.py
from polypath.app.build import build
from polypath.app.report import describe_path, format_stats


def run(start: int = 0, end: int = 2):
    app = build({"run_id": "demo", "graph": {"by": "sample"}, "query": {"start": start, "end": end}})
    result = app.run()
    print(describe_path(result.path) or f"No path from {start} to {end}")
    print(format_stats(result))
    return result


if __name__ == "__main__":
    run()
