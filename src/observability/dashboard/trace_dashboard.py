"""Streamlit dashboard for module-load trace inspection."""

from __future__ import annotations

import json
from pathlib import Path

from src.core.types import FileLoadRecord


def load_traces(log_file: str) -> list[dict]:
    path = Path(log_file).expanduser()
    if not path.exists():
        return []
    rows = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            rows.append(json.loads(line))
        except json.JSONDecodeError:
            continue
    return rows


def file_rows(trace: dict) -> list[dict]:
    """Flatten the ``load`` stage of one trace into table rows."""

    stage = trace.get("stages", {}).get("load") or {}
    items = (stage.get("data") or {}).get("files", [])
    rows = []
    for item in items:
        try:
            record = FileLoadRecord.from_dict(item)
        except (TypeError, ValueError):
            continue
        rows.append(
            {
                "module": Path(record.path).parent.name,
                "path": record.path,
                "status": record.status,
                "load_time_s": record.elapsed,
            }
        )
    return rows


def run_dashboard(log_file: str = "logs/load_traces.jsonl") -> None:
    try:
        import streamlit as st
    except ImportError as e:  # pragma: no cover
        raise RuntimeError("streamlit is required for dashboard") from e

    st.set_page_config(page_title="Module Load Traces", layout="wide")
    st.title("Module Load Traces")

    traces = load_traces(log_file)
    st.caption(f"Loaded {len(traces)} traces from {log_file}")
    if not traces:
        st.info("No traces found.")
        return

    trace_ids = [t.get("trace_id", "unknown") for t in traces]
    selected_id = st.selectbox("Trace ID", options=trace_ids)
    selected = next((t for t in traces if t.get("trace_id") == selected_id), traces[0])

    st.subheader("Overview")
    st.json(
        {
            "trace_id": selected.get("trace_id"),
            "started_at": selected.get("started_at"),
            "ended_at": selected.get("ended_at"),
            "total_latency": selected.get("total_latency"),
            "base_directory": selected.get("base_directory"),
            "modules": selected.get("modules"),
        }
    )

    st.subheader("Files")
    rows = file_rows(selected)
    if rows:
        st.dataframe(rows, use_container_width=True)
    else:
        st.info("No load stage recorded for this trace.")

    st.subheader("Stages")
    stages = selected.get("stages", {})
    if isinstance(stages, dict):
        for stage_name, stage_payload in stages.items():
            with st.expander(stage_name, expanded=False):
                st.json(stage_payload)


if __name__ == "__main__":  # pragma: no cover
    import sys

    run_dashboard(sys.argv[1] if len(sys.argv) > 1 else "logs/load_traces.jsonl")
