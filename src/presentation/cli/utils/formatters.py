"""Output formatting utilities for CLI."""

import json
from typing import Any, Dict, List

import yaml
from tabulate import tabulate


def format_output(data: Any, format_type: str) -> str:
    """Format data for output.

    Args:
        data: Data to format
        format_type: Output format ('json', 'yaml', 'table')

    Returns:
        Formatted string
    """
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, indent=2, allow_unicode=True)
    elif format_type == "table":
        if isinstance(data, dict):
            return format_dict_as_table(data)
        elif isinstance(data, list):
            return format_list_as_table(data)
        else:
            return str(data)
    else:
        raise ValueError(f"Unsupported format: {format_type}")


def format_dict_as_table(data: Dict[str, Any], max_depth: int = 3) -> str:
    """Format a nested dictionary as a two-column key/value table."""
    rows = []

    def flatten_dict(d: Dict[str, Any], prefix: str = "", depth: int = 0):
        for key, value in d.items():
            full_key = f"{prefix}.{key}" if prefix else key

            if isinstance(value, dict) and depth < max_depth:
                flatten_dict(value, full_key, depth + 1)
            else:
                rows.append([full_key, "-" if value is None else value])

    flatten_dict(data)

    if not rows:
        return "No data"

    return tabulate(rows, headers=["Key", "Value"], tablefmt="grid")


def format_list_as_table(data: List[Dict[str, Any]]) -> str:
    """Format a list of flat dictionaries as a table, one row per item."""
    if not data:
        return "No data"

    headers = list(data[0].keys())
    rows = [[item.get(header, "") for header in headers] for item in data]

    return tabulate(rows, headers=headers, tablefmt="grid")


def task_groups_to_rows(groups: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten serialized task groups into table rows."""
    rows = []
    for group in groups:
        tasks = group["tasks"]
        rows.append(
            {
                "date": group["date"],
                "all": tasks["all"]["count"],
                "completed": tasks["completed"]["count"],
                "todo": tasks["todo"]["count"],
                "time_all": tasks["all"]["execution_time"],
                "time_completed": tasks["completed"]["execution_time"],
                "time_todo": tasks["todo"]["execution_time"],
            }
        )

    return rows
