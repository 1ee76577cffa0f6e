"""CLI reporters."""

from teamsync.cli.reporting.rich import RichReconcileReporter

__all__ = ["RichReconcileReporter"]
