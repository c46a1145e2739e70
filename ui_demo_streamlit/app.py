"""Streamlit demo UI for task-insights."""

from __future__ import annotations

import tempfile
from collections import Counter
from pathlib import Path
from typing import Any

from task_insights.adapters.records import load_tasks
from task_insights.config import load_policy
from task_insights.engine import analyze, suggest, summarize

LEVEL_ICONS = {"warning": "⚠️", "info": "ℹ️"}


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return load_tasks(temp_path)


def _build_summary(tasks: list) -> dict[str, Any]:
    priority_counts = Counter(task.priority for task in tasks)
    total = len(tasks)
    done = sum(1 for task in tasks if task.completed)
    return {
        "total_tasks": total,
        "completed": done,
        "done_pct": (done / total * 100.0) if total else 0.0,
        "priority_counts": {priority: priority_counts.get(priority, 0) for priority in ("high", "medium", "low")},
    }


def run_engine(tasks: list, description: str, pending_only: bool = False) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    policy = load_policy()
    return {
        "summary": _build_summary(tasks),
        "analysis": analyze(description).to_dict() if description.strip() else None,
        "suggestions": [item.to_dict() for item in suggest(tasks, policy=policy, pending_only=pending_only)],
        "progress": summarize(tasks, policy=policy).to_dict(),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Task Insights Demo", layout="wide")
    st.title("Task Insights — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload task file", type=["csv", "json"])
        use_demo = st.checkbox("Load demo tasks", value=True)
        description = st.text_area("Describe a task to analyze", value="Fix urgent critical bug in login API")
        pending_only = st.checkbox("Suggestions for pending tasks only", value=False)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            tasks = load_tasks("examples/sample_tasks.csv")
            data_source = "demo tasks (examples/sample_tasks.csv)"
        elif uploaded is not None:
            tasks = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo tasks'.")
            return

        result = run_engine(tasks, description, pending_only=pending_only)

        st.success(f"Loaded {len(tasks)} tasks from {data_source}.")

        st.subheader("A) Task Summary")
        summary = result["summary"]
        c1, c2, c3 = st.columns(3)
        c1.metric("Total tasks", summary["total_tasks"])
        c2.metric("Completed", summary["completed"])
        c3.metric("% done", f"{summary['done_pct']:.2f}%")
        st.table([summary["priority_counts"]])

        if result["analysis"] is not None:
            st.subheader("B) Description Analysis")
            analysis = result["analysis"]
            a1, a2, a3, a4 = st.columns(4)
            a1.metric("Priority", analysis["priority"])
            a2.metric("Category", analysis["category"])
            a3.metric("Complexity", analysis["complexity"])
            a4.metric("Estimate", analysis["estimatedTime"])
            st.write("Keywords:", ", ".join(analysis["keywords"]) or "none")
            for item in analysis["suggestions"]:
                st.write(f"- {item}")

        st.subheader("C) Suggestions")
        if not result["suggestions"]:
            st.write("No suggestions for this task collection.")
        for item in result["suggestions"]:
            st.write(f"{LEVEL_ICONS.get(item['level'], '')} **{item['title']}**: {item['message']}")
            st.caption(item["action"])

        st.subheader("D) Progress Summary")
        progress = result["progress"]
        st.write(progress["overview"])
        p1, p2 = st.columns(2)
        p1.metric("Productivity score", progress["keyMetrics"]["productivityScore"])
        p2.metric("Trend", progress["trendAnalysis"]["trend"])
        for insight in progress["insights"]:
            st.write(insight)
        if progress["recommendations"]:
            st.table(progress["recommendations"])
        st.write("**Next steps**")
        for step in progress["nextSteps"]:
            st.write(f"- {step}")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
