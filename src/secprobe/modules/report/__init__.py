"""Reporting module for SecProbe."""

from .console import print_port_report, print_session, score_style
from .json_report import (
    build_collection_report,
    build_port_report,
    build_report,
    default_report_path,
    write_json,
    write_json_report,
)

__all__ = [
    "build_collection_report",
    "build_port_report",
    "build_report",
    "default_report_path",
    "print_port_report",
    "print_session",
    "score_style",
    "write_json",
    "write_json_report",
]
